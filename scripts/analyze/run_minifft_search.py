#!/usr/bin/env python3
"""Search a simulated pulse-train mini-FFT and print the top candidates."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from minifft_search.analysis.candidates import candidates_to_frame
from minifft_search.analysis.harmonics import harmonic_sum_powers, interbinned_powers
from minifft_search.analysis.interpolate import interpolate_minifft
from minifft_search.kernels.cache import KernelCache
from minifft_search.search import MiniFFTSearchConfig, search_minifft_with_config
from minifft_search.sim.pulsar import simulate_minifft_pulse_train


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--num-minifft",
        type=int,
        default=256,
        help="Number of complex mini-FFT bins, a power of two (default: 256).",
    )
    parser.add_argument(
        "--frequency-bins",
        type=float,
        default=12.25,
        help="Pulse-train fundamental frequency in mini-FFT bins (default: 12.25).",
    )
    parser.add_argument(
        "--duty-cycle",
        type=float,
        default=0.05,
        help="Pulse FWHM as a fraction of the period (default: 0.05).",
    )
    parser.add_argument(
        "--noise-std",
        type=float,
        default=1.0,
        help="Gaussian noise standard deviation per time sample (default: 1.0).",
    )
    parser.add_argument("--seed", type=int, default=0, help="RNG seed (default: 0).")
    parser.add_argument(
        "--harmonics",
        type=int,
        default=4,
        help="Number of harmonics to sum (default: 4).",
    )
    parser.add_argument(
        "--num-candidates",
        type=int,
        default=10,
        help="Number of candidates to report (default: 10).",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        default=None,
        help="Optional output path for a diagnostic figure.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    minifft = simulate_minifft_pulse_train(
        args.num_minifft,
        frequency_bins=float(args.frequency_bins),
        duty_cycle=float(args.duty_cycle),
        noise_std=float(args.noise_std),
        rng=int(args.seed),
    )
    # Raw powers of white noise average 2 * num_minifft * noise_std ** 2.
    noise_power = 2.0 * args.num_minifft * max(float(args.noise_std), 1.0e-3) ** 2
    config = MiniFFTSearchConfig(
        norm=1.0 / noise_power,
        harmonics=int(args.harmonics),
        num_candidates=int(args.num_candidates),
    )
    cache = KernelCache()
    candidates = search_minifft_with_config(minifft, config, kernel_cache=cache)
    print(candidates_to_frame(candidates, drop_empty=True).to_string(index=False))

    if args.figure_out is not None:
        from minifft_search.plotting.figure_builders import MiniFFTSearchFigureBuilder

        spectrum = interpolate_minifft(minifft, norm=config.norm, kernel_cache=cache)
        summed = harmonic_sum_powers(spectrum, config.harmonics) if config.harmonics > 1 else None
        figure, _ = MiniFFTSearchFigureBuilder().build(
            interbinned_powers(spectrum),
            candidates,
            summed_powers=summed,
            harmonics=config.harmonics,
        )
        args.figure_out.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(args.figure_out)
        print(f"Wrote {args.figure_out}")


if __name__ == "__main__":
    main()
