"""Unit tests for kernels.response."""

from __future__ import annotations

import numpy as np
import pytest

from minifft_search.kernels.response import (
    place_complex_kernel,
    response_halfwidth,
    response_kernel,
)


def test_response_halfwidth_low_and_high_accuracy() -> None:
    assert response_halfwidth("low") == 16
    assert response_halfwidth("high") == 63
    assert response_halfwidth() == response_halfwidth("low")


def test_response_halfwidth_rejects_unknown_accuracy() -> None:
    with pytest.raises(ValueError, match="accuracy must be 'low' or 'high'"):
        response_halfwidth("medium")  # type: ignore[arg-type]


def test_response_kernel_zero_offset_interpolates_half_bins() -> None:
    kernel = response_kernel(0.0, 2, 32)
    centre = 16

    assert kernel.shape == (32,)
    assert kernel[centre] == 1.0 + 0.0j
    # Whole-bin offsets from the centre are sinc zeros.
    assert np.allclose(kernel[centre + 2::2], 0.0, atol=1e-12)
    assert np.allclose(kernel[:centre:2], 0.0, atol=1e-12)
    # Half-bin neighbours have |sinc(pi / 2)| = 2 / pi.
    assert np.isclose(abs(kernel[centre + 1]), 2.0 / np.pi)
    assert np.isclose(abs(kernel[centre - 1]), 2.0 / np.pi)


def test_response_kernel_magnitude_decays_away_from_centre() -> None:
    magnitude = np.abs(response_kernel(0.0, 2, 64))
    odd_offsets = magnitude[33::2]
    assert np.all(np.diff(odd_offsets) < 0.0)


def test_response_kernel_small_offset_uses_peak_expansion() -> None:
    offset = 5.0e-4
    kernel = response_kernel(offset, 2, 16)
    assert np.isclose(kernel[8].real, 1.0 - 6.579736267392905746 * offset**2)
    assert np.isclose(kernel[8].imag, offset * (np.pi - 10.335425560099940058 * offset**2))


def test_response_kernel_rejects_odd_length() -> None:
    with pytest.raises(ValueError, match="num_kern must be even"):
        response_kernel(0.0, 2, 31)


def test_place_complex_kernel_wraps_halves_around_zero() -> None:
    kernel = np.arange(8, dtype=float) + 1j * np.arange(8, dtype=float)
    placed = place_complex_kernel(kernel, 12)

    assert placed.shape == (12,)
    assert np.array_equal(placed[:4], kernel[4:])
    assert np.array_equal(placed[8:], kernel[:4])
    assert np.array_equal(placed[4:8], np.zeros(4, dtype=complex))


def test_place_complex_kernel_rejects_short_buffer() -> None:
    with pytest.raises(ValueError, match="at least as long as the kernel"):
        place_complex_kernel(np.ones(8, dtype=complex), 6)
