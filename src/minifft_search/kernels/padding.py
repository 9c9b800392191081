"""FFT-length and padding selection for interbinned mini-FFT searches."""

from __future__ import annotations

from minifft_search.kernels.response import InterpAccuracy, response_halfwidth
from minifft_search.utils.validation import as_positive_int, require_power_of_two

# Lengths up to this value are used as-is.
SMALL_FFT_LENGTH = 144

# Highly factorable transform lengths, ascending.
GOOD_FFT_LENGTHS: tuple[int, ...] = (
    288,
    540,
    1080,
    2100,
    4200,
    8232,
    16464,
    32805,
    65610,
    131220,
    262440,
    525000,
    1050000,
)


def pad_fft_length(
        num_minifft: int,
        numbetween: int = 2,
        *,
        accuracy: InterpAccuracy = "low",
) -> tuple[int, int]:
    """Choose an easily factorable FFT length and a padding length.

    Parameters
    ----------
    num_minifft : int
        Number of complex points in the mini-FFT.  Must be a power of two.
    numbetween : int
        Interpolation factor (points per Fourier bin).
    accuracy : ``"low"`` or ``"high"``
        Interpolation accuracy that bounds the padding half-width.

    Returns
    -------
    fft_length : int
        Transform length, at least ``(num_minifft + pad_length) * numbetween``.
    pad_length : int
        Number of padding bins, ``min(num_minifft // 8, response_halfwidth(accuracy))``.
    """

    length = require_power_of_two(num_minifft, "num_minifft")
    between = as_positive_int(numbetween, "numbetween")

    pad_length = min(length // 8, response_halfwidth(accuracy))
    new_length = (length + pad_length) * between

    if new_length <= SMALL_FFT_LENGTH:
        return new_length, pad_length
    for candidate in GOOD_FFT_LENGTHS:
        if new_length <= candidate:
            return candidate, pad_length
    return ((new_length + 1000) // 1000) * 1000, pad_length


__all__ = ["GOOD_FFT_LENGTHS", "SMALL_FFT_LENGTH", "pad_fft_length"]
