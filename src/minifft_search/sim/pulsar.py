"""Synthetic mini-FFTs of periodic signals for exercising the search."""

from __future__ import annotations

import numpy as np

from minifft_search.utils.validation import as_1d_array, as_positive_float, require_power_of_two


def pack_real_spectrum(rfft_values: np.ndarray) -> np.ndarray:
    """Pack a one-sided real-input FFT into mini-FFT layout.

    ``rfft_values`` has ``N + 1`` bins (DC through Nyquist).  The result has
    ``N`` bins with the real Nyquist value stored in the imaginary part of
    bin 0.
    """

    values = as_1d_array(rfft_values, "rfft_values", dtype=np.complex128)
    if values.size < 2:
        raise ValueError("rfft_values must include at least DC and Nyquist bins.")
    packed = values[:-1].copy()
    packed[0] = complex(values[0].real, values[-1].real)
    return packed


def simulate_minifft_sinusoid(
    num_minifft: int,
    *,
    frequency_bins: float,
    amplitude: float = 1.0,
    phase_rad: float = 0.0,
    noise_std: float = 0.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Return the packed mini-FFT of a real sinusoid.

    The time series has ``2 * num_minifft`` samples, so ``frequency_bins`` is
    the Fourier frequency in mini-FFT bins (``0 <= f < num_minifft``).
    """

    n_samples = _num_samples(num_minifft)
    if noise_std < 0.0:
        raise ValueError("noise_std must be non-negative.")

    time_index = np.arange(n_samples, dtype=float)
    series = float(amplitude) * np.cos(
        2.0 * np.pi * float(frequency_bins) * time_index / n_samples + float(phase_rad)
    )
    series = _add_noise(series, noise_std=noise_std, rng=rng)
    return pack_real_spectrum(np.fft.rfft(series))


def simulate_minifft_pulse_train(
    num_minifft: int,
    *,
    frequency_bins: float,
    duty_cycle: float = 0.05,
    amplitude: float = 1.0,
    noise_std: float = 0.0,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Return the packed mini-FFT of a periodic Gaussian pulse train.

    Narrow pulses (small ``duty_cycle``, the pulse FWHM as a fraction of the
    period) spread power over many harmonics of ``frequency_bins``, which is
    what harmonic summing is meant to recover.
    """

    n_samples = _num_samples(num_minifft)
    fundamental = as_positive_float(frequency_bins, "frequency_bins")
    width = as_positive_float(duty_cycle, "duty_cycle")
    if width >= 1.0:
        raise ValueError("duty_cycle must be less than 1.")
    if noise_std < 0.0:
        raise ValueError("noise_std must be non-negative.")

    phase = np.mod(np.arange(n_samples, dtype=float) * fundamental / n_samples, 1.0)
    distance = np.minimum(phase, 1.0 - phase)
    sigma = width / (2.0 * np.sqrt(2.0 * np.log(2.0)))
    series = float(amplitude) * np.exp(-0.5 * (distance / sigma) ** 2)
    series = series - np.mean(series)
    series = _add_noise(series, noise_std=noise_std, rng=rng)
    return pack_real_spectrum(np.fft.rfft(series))


def _num_samples(num_minifft: int) -> int:
    return 2 * require_power_of_two(num_minifft, "num_minifft")


def _add_noise(
    series: np.ndarray,
    *,
    noise_std: float,
    rng: np.random.Generator | int | None,
) -> np.ndarray:
    if noise_std > 0.0:
        prng = _resolve_rng(rng)
        series = series + prng.normal(scale=float(noise_std), size=series.size)
    return np.asarray(series, dtype=float)


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


__all__ = [
    "pack_real_spectrum",
    "simulate_minifft_pulse_train",
    "simulate_minifft_sinusoid",
]
