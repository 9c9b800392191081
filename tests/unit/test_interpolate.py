"""Unit tests for analysis.interpolate."""

from __future__ import annotations

import numpy as np
import pytest

from minifft_search.analysis.interpolate import interpolate_minifft
from minifft_search.kernels.cache import KernelCache


def _random_minifft(size: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed=seed)
    return rng.normal(size=size) + 1j * rng.normal(size=size)


def test_interpolate_minifft_keeps_scaled_input_on_even_bins() -> None:
    minifft = _random_minifft(64, seed=21)
    spectrum = interpolate_minifft(minifft, norm=4.0, kernel_cache=KernelCache())

    assert spectrum.num_minifft == 64
    assert spectrum.num_bins == 128
    assert spectrum.values.shape == (144,)
    assert np.allclose(spectrum.values[2:128:2], 2.0 * minifft[1:])
    assert np.isclose(spectrum.values[0], 1.0 + 0.0j)


def test_interpolate_minifft_moves_nyquist_out_of_bin_zero() -> None:
    minifft = _random_minifft(32, seed=22)
    spectrum = interpolate_minifft(minifft, norm=9.0, kernel_cache=KernelCache())

    assert np.isclose(spectrum.nyquist, 3.0 * minifft[0].imag)
    assert np.isclose(spectrum.values[64], spectrum.nyquist)


def test_interpolate_minifft_fills_half_bins_with_sinc_leakage() -> None:
    minifft = np.zeros(64, dtype=complex)
    minifft[20] = 5.0
    spectrum = interpolate_minifft(minifft, norm=1.0, kernel_cache=KernelCache())

    neighbours = np.abs(spectrum.values[[39, 41]])
    assert np.allclose(neighbours, 5.0 * 2.0 / np.pi, rtol=0.05)


def test_interpolate_minifft_does_not_modify_input() -> None:
    minifft = _random_minifft(16, seed=23)
    original = minifft.copy()
    interpolate_minifft(minifft, norm=2.0, kernel_cache=KernelCache())
    assert np.array_equal(minifft, original)


@pytest.mark.parametrize(
    ("minifft", "norm", "message"),
    [
        (np.ones(48, dtype=complex), 1.0, "must be a power of two"),
        (np.ones(4, dtype=complex), 1.0, "must be >= 8"),
        (np.ones(16, dtype=complex), 0.0, "norm must be positive"),
        (np.ones((4, 4), dtype=complex), 1.0, "must be a 1D array"),
    ],
)
def test_interpolate_minifft_rejects_invalid_input(minifft: np.ndarray, norm: float, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        interpolate_minifft(minifft, norm=norm, kernel_cache=KernelCache())
