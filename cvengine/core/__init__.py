"""Core data contracts shared by every engine layer."""

from cvengine.core.dataset import Dataset
from cvengine.core.progress import ProgressCallback

__all__ = ["Dataset", "ProgressCallback"]
