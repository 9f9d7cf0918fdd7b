from __future__ import annotations

from cvengine.contracts.run_config import DataModel
from cvengine.components.interfaces import DataLoader
from cvengine.components.data_loaders.data_loaders import TableLoader


def make_data_loader(cfg: DataModel) -> DataLoader:
    """Return the default table loader."""
    return TableLoader(cfg)
