"""Interbinned, harmonic-summed peak search of mini-FFTs."""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np
import pandas as pd

from minifft_search.analysis.candidates import (
    MiniFFTCandidates,
    candidates_to_frame,
    select_top_candidates,
)
from minifft_search.analysis.harmonics import harmonic_sum_powers
from minifft_search.analysis.interpolate import as_minifft, interpolate_minifft
from minifft_search.analysis.transforms import FFTBackend
from minifft_search.kernels.cache import KernelCache
from minifft_search.utils.validation import as_2d_array, as_positive_float, as_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MiniFFTSearchConfig:
    """Search settings shared by every mini-FFT of a run."""

    norm: float = 1.0
    harmonics: int = 1
    num_candidates: int = 10
    fft_backend: FFTBackend = "numpy"


def search_minifft(
        minifft: np.ndarray,
        *,
        norm: float,
        harmonics: int = 1,
        num_candidates: int = 10,
        num_minifft: int | None = None,
        kernel_cache: KernelCache | None = None,
        fft_backend: FFTBackend = "numpy",
) -> MiniFFTCandidates:
    """Search a short FFT for its highest (harmonic-summed) powers.

    The mini-FFT is interbinned to half-bin resolution, optionally
    harmonic-summed over aliased frequencies, and scanned for the
    ``num_candidates`` highest powers.

    Parameters
    ----------
    minifft : array_like
        Complex mini-FFT (power-of-two length, at least 8).  The imaginary
        part of bin 0 holds the Nyquist value.
    norm : float
        Factor that converts raw powers into normalised powers.  Must be
        positive.
    harmonics : int
        Number of harmonics to sum.  ``1`` searches the interbinned powers
        directly.
    num_candidates : int
        Number of candidates to return.
    num_minifft : int or None
        Expected mini-FFT length.  Checked against ``len(minifft)`` when given.
    kernel_cache : KernelCache or None
        Interpolation-kernel cache.  ``None`` uses the calling thread's
        default cache.
    fft_backend : ``"numpy"`` or ``"scipy"``
        FFT implementation.

    Returns
    -------
    MiniFFTCandidates
        Powers and frequencies (in mini-FFT bins), sorted by decreasing power.

    Raises
    ------
    ValueError
        If any argument fails validation.  Raised before any transform work.
    """

    values = as_minifft(minifft, num_minifft=num_minifft)
    resolved_norm = as_positive_float(norm, "norm")
    num_harmonics = as_positive_int(harmonics, "harmonics")
    count = as_positive_int(num_candidates, "num_candidates")

    spectrum = interpolate_minifft(
        values,
        norm=resolved_norm,
        kernel_cache=kernel_cache,
        fft_backend=fft_backend,
    )
    powers = harmonic_sum_powers(spectrum, num_harmonics)
    return select_top_candidates(powers, count)


def search_minifft_with_config(
        minifft: np.ndarray,
        config: MiniFFTSearchConfig,
        *,
        kernel_cache: KernelCache | None = None,
) -> MiniFFTCandidates:
    """Run :func:`search_minifft` with settings from ``config``."""

    return search_minifft(
        minifft,
        norm=config.norm,
        harmonics=config.harmonics,
        num_candidates=config.num_candidates,
        kernel_cache=kernel_cache,
        fft_backend=config.fft_backend,
    )


def search_minifft_blocks(
        minifft_blocks: np.ndarray,
        config: MiniFFTSearchConfig,
        *,
        kernel_cache: KernelCache | None = None,
        drop_empty: bool = True,
) -> pd.DataFrame:
    """Search each row of ``minifft_blocks`` and tabulate the candidates.

    Every row is searched independently with the same settings and kernel
    cache.  The returned table has a ``block`` column (row index) followed by
    ``rank``, ``power`` and ``frequency_bins``.
    """

    blocks = as_2d_array(minifft_blocks, "minifft_blocks", dtype=np.complex128)
    cache = KernelCache(fft_backend=config.fft_backend) if kernel_cache is None else kernel_cache

    frames: list[pd.DataFrame] = []
    for block_index, block in enumerate(blocks):
        candidates = search_minifft_with_config(block, config, kernel_cache=cache)
        frame = candidates_to_frame(candidates, drop_empty=drop_empty)
        frame.insert(0, "block", block_index)
        frames.append(frame)
    logger.debug("Searched %d mini-FFT blocks of length %d", blocks.shape[0], blocks.shape[1])

    return pd.concat(frames, ignore_index=True)


__all__ = [
    "MiniFFTSearchConfig",
    "search_minifft",
    "search_minifft_blocks",
    "search_minifft_with_config",
]
