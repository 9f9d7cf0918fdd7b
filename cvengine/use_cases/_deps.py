"""Dependency helpers for use-cases.

Use-cases accept their dependencies (seed, progress) explicitly instead of
reading globals. This module keeps *small* helpers only.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from cvengine.errors import InvalidParameterError


def resolve_grid(flexibility_grid: Iterable[Any], *, minimum: int) -> List[int]:
    """Validate a flexibility grid: non-empty, integral, strictly ascending, >= minimum."""

    grid = list(flexibility_grid)
    if not grid:
        raise InvalidParameterError("flexibility_grid must contain at least one value.")

    out: List[int] = []
    for v in grid:
        if isinstance(v, bool) or int(v) != v:
            raise InvalidParameterError(f"flexibility values must be integers; got {v!r}.")
        out.append(int(v))

    if out[0] < minimum:
        raise InvalidParameterError(
            f"flexibility values must be >= {minimum} for this family; got {out[0]}."
        )
    if any(b <= a for a, b in zip(out, out[1:])):
        raise InvalidParameterError(f"flexibility_grid must be strictly ascending; got {out}.")

    return out
