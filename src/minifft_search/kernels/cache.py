"""Cached frequency-domain interpolation kernel for mini-FFT searches."""

from __future__ import annotations

import logging
import threading

import numpy as np

from minifft_search.analysis.transforms import FFTBackend, complex_fft
from minifft_search.kernels.padding import pad_fft_length
from minifft_search.kernels.response import place_complex_kernel, response_kernel
from minifft_search.utils.validation import require_power_of_two

logger = logging.getLogger(__name__)

# Interbinning factor; the search is hard-wired to half-bin steps.
NUMBETWEEN = 2


class KernelCacheError(RuntimeError):
    """Raised when the interpolation kernel cannot be rebuilt."""


class KernelCache:
    """Holds the FFT of the interbinning kernel for one mini-FFT length.

    The kernel is rebuilt whenever it is requested for a different
    ``num_minifft`` than the one it was built for.  One instance must not be
    shared between threads; use :func:`default_kernel_cache` or one instance
    per worker.
    """

    def __init__(self, *, fft_backend: FFTBackend = "numpy") -> None:
        self._fft_backend = fft_backend
        self._num_minifft: int | None = None
        self._fft_length: int | None = None
        self._kernel: np.ndarray | None = None

    @property
    def num_minifft(self) -> int | None:
        return self._num_minifft

    @property
    def fft_length(self) -> int | None:
        return self._fft_length

    @property
    def is_valid(self) -> bool:
        return self._kernel is not None

    def ensure(self, num_minifft: int) -> np.ndarray:
        """Return the read-only kernel FFT for ``num_minifft``, rebuilding if stale."""

        if self._kernel is None or self._num_minifft != num_minifft:
            return self.rebuild(num_minifft)
        return self._kernel

    def rebuild(self, num_minifft: int) -> np.ndarray:
        """Unconditionally rebuild the kernel for ``num_minifft``.

        The cached entry is replaced only once the new kernel is complete.  If
        the build fails the cache is left empty: ``MemoryError`` propagates
        unchanged and any other error is raised as :class:`KernelCacheError`.
        """

        length = require_power_of_two(num_minifft, "num_minifft")
        try:
            fft_length, kernel = _build_kernel(length, fft_backend=self._fft_backend)
        except MemoryError:
            self.invalidate()
            raise
        except Exception as error:
            self.invalidate()
            raise KernelCacheError(
                f"Failed to build interpolation kernel for num_minifft={length}."
            ) from error

        kernel.setflags(write=False)
        self._num_minifft, self._fft_length, self._kernel = length, fft_length, kernel
        logger.debug("Rebuilt interpolation kernel: num_minifft=%d fft_length=%d", length, fft_length)
        return kernel

    def invalidate(self) -> None:
        """Drop the cached kernel."""

        if self._kernel is not None:
            logger.debug("Invalidated interpolation kernel for num_minifft=%s", self._num_minifft)
        self._num_minifft = None
        self._fft_length = None
        self._kernel = None


_thread_state = threading.local()


def default_kernel_cache() -> KernelCache:
    """Return the calling thread's shared :class:`KernelCache`."""

    cache = getattr(_thread_state, "cache", None)
    if cache is None:
        cache = KernelCache()
        _thread_state.cache = cache
    return cache


def _build_kernel(num_minifft: int, *, fft_backend: FFTBackend) -> tuple[int, np.ndarray]:
    fft_length, half_width = pad_fft_length(num_minifft, NUMBETWEEN)
    if half_width < 1:
        raise ValueError("num_minifft is too short to hold an interpolation kernel.")
    kernel = response_kernel(0.0, NUMBETWEEN, 4 * half_width)
    placed = place_complex_kernel(kernel, fft_length)
    return fft_length, complex_fft(placed, -1, fft_backend=fft_backend)


__all__ = ["KernelCache", "KernelCacheError", "NUMBETWEEN", "default_kernel_cache"]
