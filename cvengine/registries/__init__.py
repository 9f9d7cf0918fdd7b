"""Engine registries.

These registries replace factory if/else sprawl. The core idea is:
- add a new implementation
- register it
- the rest of the system stays closed for modification
"""

from .models import list_model_families, make_model_builder, register_model_family
from .splitters import list_split_modes, make_splitter, register_splitter

__all__ = [
    "make_model_builder",
    "register_model_family",
    "list_model_families",
    "make_splitter",
    "register_splitter",
    "list_split_modes",
]
