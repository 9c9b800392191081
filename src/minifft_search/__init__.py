"""Interbinned, harmonic-summed peak search of short FFTs (mini-FFTs)."""

from minifft_search.analysis.transforms import complex_corr_conv, complex_fft, spread_no_pad
from minifft_search.kernels.response import place_complex_kernel, response_halfwidth, response_kernel
from minifft_search.kernels.padding import GOOD_FFT_LENGTHS, pad_fft_length
from minifft_search.kernels.cache import (
    NUMBETWEEN,
    KernelCache,
    KernelCacheError,
    default_kernel_cache,
)
from minifft_search.analysis.interpolate import InterpolatedSpectrum, interpolate_minifft
from minifft_search.analysis.harmonics import (
    aliased_powers,
    harmonic_sum_powers,
    interbinned_powers,
    sum_harmonics,
)
from minifft_search.analysis.candidates import (
    CandidateTracker,
    MiniFFTCandidates,
    candidates_to_frame,
    percolate_pows_and_freqs,
    select_top_candidates,
)
from minifft_search.search import (
    MiniFFTSearchConfig,
    search_minifft,
    search_minifft_blocks,
    search_minifft_with_config,
)

__version__ = "0.1.0"

__all__ = [
    "GOOD_FFT_LENGTHS",
    "NUMBETWEEN",
    "CandidateTracker",
    "InterpolatedSpectrum",
    "KernelCache",
    "KernelCacheError",
    "MiniFFTCandidates",
    "MiniFFTSearchConfig",
    "aliased_powers",
    "candidates_to_frame",
    "complex_corr_conv",
    "complex_fft",
    "default_kernel_cache",
    "harmonic_sum_powers",
    "interbinned_powers",
    "interpolate_minifft",
    "pad_fft_length",
    "percolate_pows_and_freqs",
    "place_complex_kernel",
    "response_halfwidth",
    "response_kernel",
    "search_minifft",
    "search_minifft_blocks",
    "search_minifft_with_config",
    "select_top_candidates",
    "spread_no_pad",
    "sum_harmonics",
]
