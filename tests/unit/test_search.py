"""Unit tests for the top-level mini-FFT search."""

from __future__ import annotations

import numpy as np
import pytest

from minifft_search.kernels.cache import KernelCache
from minifft_search.search import (
    MiniFFTSearchConfig,
    search_minifft,
    search_minifft_blocks,
    search_minifft_with_config,
)
from minifft_search.sim.pulsar import simulate_minifft_sinusoid


def _noise_minifft(size: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed=seed)
    return rng.normal(size=size) + 1j * rng.normal(size=size)


def test_single_tone_peak_and_half_bin_sidelobes() -> None:
    minifft = np.zeros(64, dtype=complex)
    minifft[5] = 10.0

    candidates = search_minifft(minifft, norm=1.0, harmonics=1, num_candidates=3, kernel_cache=KernelCache())

    assert candidates.frequencies[0] == 5.0
    assert np.isclose(candidates.powers[0], 100.0, rtol=1e-9)
    assert sorted(candidates.frequencies[1:].tolist()) == [4.5, 5.5]
    assert np.all((candidates.powers[1:] > 30.0) & (candidates.powers[1:] < 50.0))


def test_norm_scales_candidate_powers() -> None:
    minifft = _noise_minifft(128, seed=51)
    # Keep the unscaled unit DC reference out of reach of the kernel.
    minifft[:20] = 0.0
    base = search_minifft(minifft, norm=1.0, num_candidates=5, kernel_cache=KernelCache())
    scaled = search_minifft(minifft, norm=3.0, num_candidates=5, kernel_cache=KernelCache())

    assert np.array_equal(base.frequencies, scaled.frequencies)
    assert np.allclose(scaled.powers, 3.0 * base.powers)


def test_search_is_idempotent_with_cache_reuse() -> None:
    minifft = _noise_minifft(256, seed=52)
    cache = KernelCache()

    first = search_minifft(minifft, norm=0.5, harmonics=3, num_candidates=8, kernel_cache=cache)
    kernel = cache.ensure(256)
    second = search_minifft(minifft, norm=0.5, harmonics=3, num_candidates=8, kernel_cache=cache)

    assert cache.ensure(256) is kernel
    assert np.array_equal(first.powers, second.powers)
    assert np.array_equal(first.frequencies, second.frequencies)


def test_search_rebuilds_cache_when_length_changes() -> None:
    cache = KernelCache()
    short = _noise_minifft(64, seed=53)
    long = _noise_minifft(128, seed=54)

    search_minifft(short, norm=1.0, kernel_cache=cache)
    assert cache.num_minifft == 64
    result = search_minifft(long, norm=1.0, kernel_cache=cache)
    assert cache.num_minifft == 128

    fresh = search_minifft(long, norm=1.0, kernel_cache=KernelCache())
    assert np.array_equal(result.powers, fresh.powers)
    assert np.array_equal(result.frequencies, fresh.frequencies)


def test_search_candidates_sorted_and_in_range() -> None:
    minifft = _noise_minifft(128, seed=55)
    for harmonics, top_frequency in ((1, 128.0), (4, 256.0)):
        candidates = search_minifft(minifft, norm=1.0, harmonics=harmonics, num_candidates=16)
        assert candidates.powers.shape == (16,)
        assert np.all(np.diff(candidates.powers) <= 0.0)
        assert np.all(candidates.frequencies > 0.0)
        assert np.all(candidates.frequencies < top_frequency + 0.5)
        assert np.array_equal(2.0 * candidates.frequencies, np.round(2.0 * candidates.frequencies))


def test_search_uses_default_cache_when_none_given() -> None:
    minifft = _noise_minifft(32, seed=56)
    implicit = search_minifft(minifft, norm=1.0, num_candidates=4)
    explicit = search_minifft(minifft, norm=1.0, num_candidates=4, kernel_cache=KernelCache())
    assert np.allclose(implicit.powers, explicit.powers)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"norm": 0.0}, "norm must be positive"),
        ({"norm": 1.0, "harmonics": 0}, "harmonics must be >= 1"),
        ({"norm": 1.0, "num_candidates": 0}, "num_candidates must be >= 1"),
        ({"norm": 1.0, "num_minifft": 32}, "does not match"),
        ({"norm": 1.0, "num_minifft": 64.5}, "num_minifft must be an integer"),
        ({"norm": 1.0, "num_minifft": 64.0}, "num_minifft must be an integer"),
    ],
)
def test_search_validates_before_touching_cache(kwargs: dict, message: str) -> None:
    cache = KernelCache()
    with pytest.raises(ValueError, match=message):
        search_minifft(_noise_minifft(64, seed=57), kernel_cache=cache, **kwargs)
    assert not cache.is_valid


def test_search_rejects_non_power_of_two_length() -> None:
    with pytest.raises(ValueError, match="must be a power of two"):
        search_minifft(np.ones(96, dtype=complex), norm=1.0)


def test_search_with_config_matches_keyword_call_and_scipy_backend() -> None:
    minifft = _noise_minifft(64, seed=58)
    config = MiniFFTSearchConfig(norm=2.0, harmonics=2, num_candidates=6, fft_backend="scipy")

    from_config = search_minifft_with_config(minifft, config, kernel_cache=KernelCache())
    direct = search_minifft(minifft, norm=2.0, harmonics=2, num_candidates=6, kernel_cache=KernelCache())

    assert np.allclose(from_config.powers, direct.powers)
    assert np.array_equal(from_config.frequencies, direct.frequencies)


def test_search_minifft_blocks_tabulates_each_block() -> None:
    blocks = np.vstack(
        [simulate_minifft_sinusoid(64, frequency_bins=bin_index) for bin_index in (5.0, 9.0, 13.0)]
    )
    config = MiniFFTSearchConfig(norm=1.0 / 128.0, harmonics=1, num_candidates=3)

    table = search_minifft_blocks(blocks, config)

    assert list(table.columns) == ["block", "rank", "power", "frequency_bins"]
    assert sorted(table["block"].unique().tolist()) == [0, 1, 2]
    top = table.loc[table["rank"] == 1].sort_values("block")
    assert top["frequency_bins"].tolist() == [5.0, 9.0, 13.0]
