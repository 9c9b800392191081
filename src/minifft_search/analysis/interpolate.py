"""Interbinned (half-bin) interpolation of mini-FFTs."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from minifft_search.analysis.transforms import FFTBackend, complex_corr_conv, spread_no_pad
from minifft_search.kernels.cache import NUMBETWEEN, KernelCache, default_kernel_cache
from minifft_search.utils.validation import (
    as_1d_array,
    as_positive_float,
    as_positive_int,
    require_power_of_two,
)

# Shortest mini-FFT whose padding leaves room for a kernel.
MIN_NUM_MINIFFT = 8


@dataclass(frozen=True)
class InterpolatedSpectrum:
    """Interbinned mini-FFT on a half-bin grid.

    ``values[2 * k]`` holds the normalised input bin ``k`` and odd indices
    hold the interpolated half-bin values.  ``values[0]`` is the unit power
    reference and ``nyquist`` the normalised Nyquist amplitude.
    """

    values: np.ndarray
    nyquist: float
    num_minifft: int

    @property
    def num_bins(self) -> int:
        """Number of half-bin samples up to (excluding) Nyquist."""
        return NUMBETWEEN * self.num_minifft


def as_minifft(minifft: np.ndarray, *, num_minifft: int | None = None) -> np.ndarray:
    """Return a validated complex mini-FFT array."""

    values = as_1d_array(minifft, "minifft", dtype=np.complex128)
    require_power_of_two(values.size, "len(minifft)", minimum=MIN_NUM_MINIFFT)
    if num_minifft is not None:
        expected = as_positive_int(num_minifft, "num_minifft")
        if expected != values.size:
            raise ValueError(
                f"num_minifft ({expected}) does not match len(minifft) ({values.size})."
            )
    return values


def interpolate_minifft(
        minifft: np.ndarray,
        *,
        norm: float,
        kernel_cache: KernelCache | None = None,
        fft_backend: FFTBackend = "numpy",
) -> InterpolatedSpectrum:
    """Spread, normalise and interbin a mini-FFT.

    Parameters
    ----------
    minifft : array_like
        Complex mini-FFT of power-of-two length.  ``minifft[0].imag`` holds
        the Nyquist value.  The input is not modified.
    norm : float
        Factor that converts raw powers into normalised powers.  Amplitudes
        are scaled by ``sqrt(norm)``.
    kernel_cache : KernelCache or None
        Cache holding the interbinning kernel.  ``None`` uses the calling
        thread's default cache.
    fft_backend : ``"numpy"`` or ``"scipy"``
        FFT implementation for the correlation.

    Returns
    -------
    InterpolatedSpectrum
        Complex spectrum of the padded FFT length on a half-bin grid.
    """

    values = as_minifft(minifft)
    sqrt_norm = np.sqrt(as_positive_float(norm, "norm"))
    num_minifft = values.size
    num_bins = NUMBETWEEN * num_minifft

    cache = default_kernel_cache() if kernel_cache is None else kernel_cache
    kernel = cache.ensure(num_minifft)

    spread = spread_no_pad(values, kernel.size, NUMBETWEEN)
    nyquist = float(spread[0].imag * sqrt_norm)
    spread[0] = 1.0 + 0.0j
    spread[NUMBETWEEN:num_bins:NUMBETWEEN] *= sqrt_norm
    spread[num_bins] = nyquist + 0.0j

    interpolated = complex_corr_conv(spread, kernel, mode="corr", transform="data", fft_backend=fft_backend)
    return InterpolatedSpectrum(values=interpolated, nyquist=nyquist, num_minifft=num_minifft)


__all__ = ["InterpolatedSpectrum", "MIN_NUM_MINIFFT", "as_minifft", "interpolate_minifft"]
