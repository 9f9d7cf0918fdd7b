"""Parsing adapters (readers).

Readers are responsible for *format parsing* only. Shape coercion lives in
:mod:`cvengine.core.shapes`.
"""

from .base import Reader, coerce_numeric_matrix
from .tabular_reader import TabularReader, load_dataset_table

__all__ = [
    "Reader",
    "coerce_numeric_matrix",
    "TabularReader",
    "load_dataset_table",
]
