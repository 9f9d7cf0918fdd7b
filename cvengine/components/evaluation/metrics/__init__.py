"""Loss registry and scoring helpers."""

from .registry import list_losses, score

__all__ = ["list_losses", "score"]
