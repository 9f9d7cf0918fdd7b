from __future__ import annotations

"""Scoring facade.

- loss registry and core scoring live in cvengine.components.evaluation.metrics.registry
- shared input checks live in cvengine.components.evaluation.metrics.helpers

This module remains the stable import path for the rest of the codebase.
"""

from cvengine.components.evaluation.metrics import list_losses, score

__all__ = ["score", "list_losses"]
