from __future__ import annotations

from typing import Literal

import numpy as np
import scipy.fft

from minifft_search.utils.validation import as_1d_array, as_positive_int

FFTBackend = Literal["numpy", "scipy"]
CorrelationMode = Literal["corr", "conv"]
TransformTargets = Literal["data", "both"]


def complex_fft(values: np.ndarray, direction: int, *, fft_backend: FFTBackend = "numpy") -> np.ndarray:
    """Complex FFT with an explicit sign convention.

    ``direction=-1`` is the forward transform (``exp(-2 pi i f n / N)``) and
    ``direction=+1`` the inverse transform.  Neither direction is normalised,
    so a forward/inverse pair scales the input by ``N``.
    """

    data = as_1d_array(values, "values", dtype=np.complex128)
    backend = _resolve_fft_backend(fft_backend)
    if direction == -1:
        return np.fft.fft(data) if backend == "numpy" else scipy.fft.fft(data)
    if direction == 1:
        if backend == "numpy":
            return np.fft.ifft(data) * data.size
        return scipy.fft.ifft(data, norm="forward")
    raise ValueError("direction must be -1 (forward) or +1 (inverse).")


def spread_no_pad(data: np.ndarray, num_result: int, numbetween: int = 2) -> np.ndarray:
    """Spread ``data`` into every ``numbetween``-th slot of a zero array.

    Samples that would land beyond ``num_result`` are dropped.
    """

    values = as_1d_array(data, "data", dtype=np.complex128)
    length = as_positive_int(num_result, "num_result")
    between = as_positive_int(numbetween, "numbetween")

    result = np.zeros(length, dtype=np.complex128)
    count = min(values.size, (length + between - 1) // between)
    result[:count * between:between] = values[:count]
    return result


def complex_corr_conv(
        data: np.ndarray,
        kernel: np.ndarray,
        *,
        mode: CorrelationMode = "corr",
        transform: TransformTargets = "data",
        fft_backend: FFTBackend = "numpy",
) -> np.ndarray:
    """Circularly correlate or convolve ``data`` with ``kernel`` using FFTs.

    Parameters
    ----------
    data : array_like
        Complex data in its natural (untransformed) domain.
    kernel : array_like
        Complex kernel of the same length as *data*.  With
        ``transform="data"`` it must already be forward-transformed (the
        usual case for a cached kernel); with ``transform="both"`` it is
        transformed here.
    mode : ``"corr"`` or ``"conv"``
        ``"corr"`` multiplies by the conjugate kernel spectrum
        (``sum_j data[n + j] * conj(kernel[j])``), ``"conv"`` by the kernel
        spectrum itself.
    transform : ``"data"`` or ``"both"``
        Which inputs still need a forward FFT.
    fft_backend : ``"numpy"`` or ``"scipy"``
        FFT implementation.

    Returns
    -------
    result : ndarray
        Complex result, normalised by ``1 / N``.
    """

    values = as_1d_array(data, "data", dtype=np.complex128)
    response = as_1d_array(kernel, "kernel", dtype=np.complex128)
    if values.size != response.size:
        raise ValueError("data and kernel must have the same length.")
    if transform not in {"data", "both"}:
        raise ValueError("transform must be 'data' or 'both'.")

    data_fft = complex_fft(values, -1, fft_backend=fft_backend)
    kernel_fft = complex_fft(response, -1, fft_backend=fft_backend) if transform == "both" else response

    if mode == "corr":
        product = data_fft * np.conj(kernel_fft)
    elif mode == "conv":
        product = data_fft * kernel_fft
    else:
        raise ValueError(f"Unsupported mode: {mode}")

    return complex_fft(product, 1, fft_backend=fft_backend) / values.size


def _resolve_fft_backend(fft_backend: str) -> FFTBackend:
    """Validate and normalise the FFT backend string."""
    backend = str(fft_backend).lower()
    if backend not in {"numpy", "scipy"}:
        raise ValueError("fft_backend must be 'numpy' or 'scipy'.")
    return backend  # type: ignore[return-value]


__all__ = [
    "CorrelationMode",
    "FFTBackend",
    "TransformTargets",
    "complex_corr_conv",
    "complex_fft",
    "spread_no_pad",
]
