"""Power extraction and incoherent harmonic summing for interbinned mini-FFTs."""

from __future__ import annotations

import numpy as np

from minifft_search.analysis.interpolate import InterpolatedSpectrum
from minifft_search.utils.validation import as_1d_array, as_positive_int


def interbinned_powers(spectrum: InterpolatedSpectrum) -> np.ndarray:
    """Return normalised powers on the half-bin grid, DC through Nyquist.

    The result has ``2 * num_minifft + 1`` entries: index 0 is fixed at 1.0
    and the last entry is ``nyquist ** 2``.
    """

    num_bins = spectrum.num_bins
    powers = np.empty(num_bins + 1, dtype=float)
    powers[0] = 1.0
    powers[1:num_bins] = _power(spectrum.values[1:num_bins])
    powers[num_bins] = spectrum.nyquist * spectrum.nyquist
    return powers


def aliased_powers(spectrum: InterpolatedSpectrum) -> np.ndarray:
    """Return powers wrapped about Nyquist so aliased frequencies are searched too.

    The result has ``4 * num_minifft`` entries and satisfies
    ``powers[i] == powers[4 * num_minifft - i]`` for ``0 < i < 2 * num_minifft``.
    """

    num_bins = spectrum.num_bins
    powers = np.empty(2 * num_bins, dtype=float)
    powers[0] = 1.0
    powers[num_bins] = spectrum.nyquist * spectrum.nyquist
    below_nyquist = _power(spectrum.values[1:num_bins])
    powers[1:num_bins] = below_nyquist
    powers[num_bins + 1:] = below_nyquist[::-1]
    return powers


def sum_harmonics(powers: np.ndarray, harmonics: int) -> np.ndarray:
    """Incoherently sum ``harmonics`` harmonics of an aliased power array.

    For each harmonic order ``h`` the power of fundamental bin ``j`` is added
    to the ``h`` output bins starting at ``j * h - h // 2``.  Bin 0 keeps its
    input value and never receives harmonic power.
    """

    values = as_1d_array(powers, "powers", dtype=float)
    num_harmonics = as_positive_int(harmonics, "harmonics")
    length = values.size

    summed = np.zeros(length, dtype=float)
    summed[0] = values[0]
    for order in range(1, num_harmonics + 1):
        offset = order // 2
        fundamentals = np.arange(1, length // order)
        if fundamentals.size == 0:
            continue
        # Targets j*h + k - h//2 are distinct, >= 1 and < length.
        targets = (fundamentals[:, np.newaxis] * order + np.arange(order) - offset).ravel()
        summed[targets] += np.repeat(values[fundamentals], order)
    return summed


def harmonic_sum_powers(spectrum: InterpolatedSpectrum, harmonics: int) -> np.ndarray:
    """Return the power array to search for ``harmonics`` summed harmonics.

    ``harmonics == 1`` gives :func:`interbinned_powers`; larger values sum
    harmonics over :func:`aliased_powers`.
    """

    num_harmonics = as_positive_int(harmonics, "harmonics")
    if num_harmonics == 1:
        return interbinned_powers(spectrum)
    return sum_harmonics(aliased_powers(spectrum), num_harmonics)


def _power(values: np.ndarray) -> np.ndarray:
    return values.real * values.real + values.imag * values.imag


__all__ = ["aliased_powers", "harmonic_sum_powers", "interbinned_powers", "sum_harmonics"]
