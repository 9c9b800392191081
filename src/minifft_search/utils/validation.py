"""Input validation helpers shared across the package."""

from __future__ import annotations

import math

import numpy as np


def as_1d_array(values: np.ndarray, name: str, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a validated non-empty 1D NumPy array."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array.")
    if array.size == 0:
        raise ValueError(f"{name} cannot be empty.")
    return array


def as_2d_array(values: np.ndarray, name: str, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a validated non-empty 2D NumPy array."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2D array with shape (n_blocks, n_bins).")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError(f"{name} cannot have empty dimensions.")
    return array


def as_positive_int(value: int, name: str, *, minimum: int = 1) -> int:
    """Return ``value`` as an ``int``, rejecting non-integers and values below ``minimum``."""

    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer.")
    resolved = int(value)
    if resolved < minimum:
        raise ValueError(f"{name} must be >= {minimum}.")
    return resolved


def as_positive_float(value: float, name: str) -> float:
    """Cast to float and raise if non-positive or non-finite."""

    resolved = float(value)
    if not math.isfinite(resolved) or resolved <= 0.0:
        raise ValueError(f"{name} must be positive and finite.")
    return resolved


def is_power_of_two(value: int) -> bool:
    return value > 0 and (value & (value - 1)) == 0


def require_power_of_two(value: int, name: str, *, minimum: int = 1) -> int:
    """Return ``value`` if it is a power of two no smaller than ``minimum``."""

    resolved = as_positive_int(value, name, minimum=minimum)
    if not is_power_of_two(resolved):
        raise ValueError(f"{name} must be a power of two (got {resolved}).")
    return resolved


__all__ = [
    "as_1d_array",
    "as_2d_array",
    "as_positive_float",
    "as_positive_int",
    "is_power_of_two",
    "require_power_of_two",
]
