"""Programmatic dataset sources (simulated data for demonstrations and tests)."""

from .synthetic import (
    cubic_signal,
    make_grouped_regression,
    make_nonlinear_regression,
    wiggly_signal,
)

__all__ = [
    "cubic_signal",
    "wiggly_signal",
    "make_nonlinear_regression",
    "make_grouped_regression",
]
