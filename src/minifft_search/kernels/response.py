"""Fourier-domain interpolation (response-function) kernels."""

from __future__ import annotations

from typing import Literal

import numpy as np

from minifft_search.utils.validation import as_1d_array, as_positive_int

InterpAccuracy = Literal["low", "high"]

# Interpolation table sizes, in Fourier bins.
NUMFINTBINS = 16
NUMLOCPOWAVG = 20
DELTAAVGBINS = 5

# Taylor coefficients of the r_response peak near zero offset.
_PEAK_REAL_COEFF = 6.579736267392905746
_PEAK_IMAG_COEFF = 10.335425560099940058


def response_halfwidth(accuracy: InterpAccuracy = "low") -> int:
    """Return the number of bins on each side of a frequency used for interpolation.

    ``"low"`` accuracy uses ``NUMFINTBINS`` bins. ``"high"`` accuracy widens
    the kernel enough to also cover local power averaging.
    """

    resolved = _resolve_accuracy(accuracy)
    if resolved == "high":
        return NUMFINTBINS * 3 + (NUMLOCPOWAVG >> 1) + DELTAAVGBINS
    return NUMFINTBINS


def response_kernel(offset: float, numbetween: int, num_kern: int) -> np.ndarray:
    """Generate the complex Fourier response of a constant-frequency signal.

    Parameters
    ----------
    offset : float
        Fractional Fourier-frequency offset of the signal from the kernel
        centre, in bins.
    numbetween : int
        Number of kernel points per Fourier bin (interpolation factor).
    num_kern : int
        Number of kernel points to generate.  Must be even.

    Returns
    -------
    kernel : ndarray
        Complex kernel of length ``num_kern``, ``exp(i r) sin(r) / r`` sampled
        at ``numbetween`` points per bin, centred on index ``num_kern // 2``.

    Raises
    ------
    ValueError
        If *num_kern* is not a positive even integer or *numbetween* is not
        positive.
    """

    between = as_positive_int(numbetween, "numbetween")
    length = as_positive_int(num_kern, "num_kern")
    if length % 2:
        raise ValueError("num_kern must be even.")

    start = np.pi * (length / (2.0 * between) + float(offset))
    phase = start - np.arange(length, dtype=float) * (np.pi / between)
    # np.sinc(x) = sin(pi x) / (pi x) handles phase == 0 exactly.
    kernel = np.exp(1j * phase) * np.sinc(phase / np.pi)

    if abs(offset) < 1.0e-3:
        offset_sq = float(offset) * float(offset)
        kernel[length // 2] = complex(
            1.0 - _PEAK_REAL_COEFF * offset_sq,
            float(offset) * (np.pi - _PEAK_IMAG_COEFF * offset_sq),
        )
    return kernel.astype(np.complex128, copy=False)


def place_complex_kernel(kernel: np.ndarray, fft_length: int) -> np.ndarray:
    """Wrap a centred kernel into a zero buffer of ``fft_length`` for FFT correlation.

    The upper half of ``kernel`` lands at the start of the buffer and the
    lower half at the end, so the kernel centre sits at index 0.
    """

    values = as_1d_array(kernel, "kernel", dtype=np.complex128)
    length = as_positive_int(fft_length, "fft_length")
    half_width = values.size // 2
    if 2 * half_width > length:
        raise ValueError("fft_length must be at least as long as the kernel.")

    placed = np.zeros(length, dtype=np.complex128)
    placed[:half_width] = values[half_width:2 * half_width]
    placed[length - half_width:] = values[:half_width]
    return placed


def _resolve_accuracy(accuracy: str) -> InterpAccuracy:
    resolved = str(accuracy).lower()
    if resolved not in {"low", "high"}:
        raise ValueError("accuracy must be 'low' or 'high'.")
    return resolved  # type: ignore[return-value]


__all__ = [
    "DELTAAVGBINS",
    "InterpAccuracy",
    "NUMFINTBINS",
    "NUMLOCPOWAVG",
    "place_complex_kernel",
    "response_halfwidth",
    "response_kernel",
]
