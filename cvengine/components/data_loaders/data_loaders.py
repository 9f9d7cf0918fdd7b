from __future__ import annotations

from dataclasses import dataclass

from cvengine.contracts.run_config import DataModel
from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidParameterError
from cvengine.io.readers.tabular_reader import TabularReader


@dataclass
class TableLoader:
    """Loads one delimited table as described by a :class:`DataModel`."""

    cfg: DataModel

    def load(self) -> Dataset:
        if not self.cfg.path:
            raise InvalidParameterError("DataModel.path is required to load a dataset from disk.")

        reader = TabularReader(
            target=self.cfg.target,
            features=self.cfg.features,
            stratum=self.cfg.stratum,
            delimiter=self.cfg.delimiter,
            encoding=self.cfg.encoding,
        )
        return reader.read(self.cfg.path)
