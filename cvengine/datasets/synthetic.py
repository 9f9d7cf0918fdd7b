from __future__ import annotations

"""Simulated regression data with a known true function.

Every generator takes ``seed`` (int, Generator or None) and draws from its own
``np.random.Generator``; nothing touches numpy's global state.
"""

from typing import Callable, Tuple, Union

import numpy as np
from numpy.polynomial import Polynomial

from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidParameterError

SeedLike = Union[None, int, np.random.Generator]


def cubic_signal(x: np.ndarray) -> np.ndarray:
    return Polynomial([0.1, -0.3, 0.4, -1.4])(x)


def wiggly_signal(x: np.ndarray) -> np.ndarray:
    return 2.5 * np.cos(1.5 * x) * x + x


_SIGNALS = {
    "cubic": cubic_signal,
    "wiggly": wiggly_signal,
}


def _rng(seed: SeedLike) -> np.random.Generator:
    return seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)


def make_nonlinear_regression(
    n_samples: int = 100,
    *,
    signal: Union[str, Callable[[np.ndarray], np.ndarray]] = "wiggly",
    noise: float = 3.0,
    x_range: Tuple[float, float] = (-5.0, 5.0),
    sort: bool = False,
    seed: SeedLike = None,
) -> Dataset:
    """One feature ``x ~ U(x_range)``, target ``f(x) + N(0, noise^2)``.

    ``sort=True`` orders records by ``x`` (useful as an ordered series for
    rolling splits).
    """
    if n_samples < 1:
        raise InvalidParameterError(f"n_samples must be >= 1; got {n_samples}.")
    if noise < 0:
        raise InvalidParameterError(f"noise must be >= 0; got {noise}.")

    f = _SIGNALS[signal] if isinstance(signal, str) else signal
    gen = _rng(seed)

    x = gen.uniform(x_range[0], x_range[1], size=n_samples)
    if sort:
        x = np.sort(x)
    y = f(x) + gen.normal(0.0, noise, size=n_samples)
    return Dataset(X=x[:, None], y=y)


def make_grouped_regression(
    n_groups: int = 10,
    per_group: int = 8,
    *,
    signal: Union[str, Callable[[np.ndarray], np.ndarray]] = "wiggly",
    noise: float = 2.0,
    group_noise: float = 1.0,
    x_range: Tuple[float, float] = (-5.0, 5.0),
    seed: SeedLike = None,
) -> Dataset:
    """Records clustered in ``n_groups`` strata sharing a random offset.

    Stratum labels are ``"g0" .. "g{n_groups-1}"``.
    """
    if n_groups < 1 or per_group < 1:
        raise InvalidParameterError(
            f"n_groups and per_group must be >= 1; got {n_groups}, {per_group}."
        )

    f = _SIGNALS[signal] if isinstance(signal, str) else signal
    gen = _rng(seed)

    n = n_groups * per_group
    labels = np.repeat(np.array([f"g{i}" for i in range(n_groups)]), per_group)
    offsets = np.repeat(gen.normal(0.0, group_noise, size=n_groups), per_group)

    x = gen.uniform(x_range[0], x_range[1], size=n)
    y = f(x) + offsets + gen.normal(0.0, noise, size=n)
    return Dataset(X=x[:, None], y=y, strata=labels)
