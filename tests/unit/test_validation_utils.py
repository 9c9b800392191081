"""Unit tests for shared validation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from minifft_search.utils.validation import (
    as_1d_array,
    as_2d_array,
    as_positive_float,
    as_positive_int,
    is_power_of_two,
    require_power_of_two,
)


def test_as_1d_array_accepts_valid_input() -> None:
    values = as_1d_array([1.0, 2.0, 3.0], "values", dtype=float)
    assert values.ndim == 1
    assert values.shape == (3,)


def test_as_1d_array_rejects_non_1d() -> None:
    with pytest.raises(ValueError, match="must be a 1D array"):
        as_1d_array(np.zeros((2, 2)), "values")


def test_as_1d_array_rejects_empty() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        as_1d_array([], "values")


def test_as_2d_array_rejects_non_2d() -> None:
    with pytest.raises(ValueError, match="must be a 2D array"):
        as_2d_array(np.zeros(4), "values")


def test_as_positive_int_rejects_bool_float_and_small_values() -> None:
    assert as_positive_int(np.int64(3), "count") == 3
    with pytest.raises(ValueError, match="must be an integer"):
        as_positive_int(True, "count")
    with pytest.raises(ValueError, match="must be an integer"):
        as_positive_int(2.0, "count")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="count must be >= 1"):
        as_positive_int(0, "count")


def test_as_positive_float_rejects_non_positive_and_non_finite() -> None:
    assert as_positive_float(2, "norm") == 2.0
    for bad in (0.0, -1.0, float("nan"), float("inf")):
        with pytest.raises(ValueError, match="norm must be positive"):
            as_positive_float(bad, "norm")


def test_power_of_two_helpers() -> None:
    assert [n for n in range(1, 70) if is_power_of_two(n)] == [1, 2, 4, 8, 16, 32, 64]
    assert require_power_of_two(64, "n", minimum=8) == 64
    with pytest.raises(ValueError, match="must be a power of two"):
        require_power_of_two(48, "n")
    with pytest.raises(ValueError, match="n must be >= 8"):
        require_power_of_two(4, "n", minimum=8)
