"""Axes-level plotting functions that receive a Matplotlib Axes object."""

from __future__ import annotations

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PathCollection
from matplotlib.lines import Line2D

from minifft_search.analysis.candidates import MiniFFTCandidates
from minifft_search.kernels.cache import NUMBETWEEN
from minifft_search.plotting.style import CANDIDATE_COLOR
from minifft_search.utils.validation import as_1d_array


def plot_interbinned_powers(
    ax: Axes,
    powers: np.ndarray,
    *,
    db: bool = False,
    floor_db: float = -120.0,
    label: str | None = None,
    color: str | None = None,
    linewidth: float | None = None,
    alpha: float = 1.0,
    title: str | None = None,
    xlabel: str = "Frequency (mini-FFT bins)",
    ylabel: str | None = None,
    grid: bool = True,
) -> Line2D:
    """Plot a half-bin power array against frequency in mini-FFT bins."""

    power_values = as_1d_array(powers, "powers", dtype=float)
    if np.any(power_values < 0.0):
        raise ValueError("power values must be non-negative.")
    frequency = np.arange(power_values.size, dtype=float) / NUMBETWEEN

    if db:
        floor_linear = 10.0 ** (floor_db / 10.0)
        y = 10.0 * np.log10(np.maximum(power_values, floor_linear))
        resolved_ylabel = "Normalized power (dB)"
    else:
        y = power_values
        resolved_ylabel = "Normalized power"

    line, = ax.plot(frequency, y, label=label, color=color, linewidth=linewidth, alpha=alpha)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel if ylabel is not None else resolved_ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


def plot_candidate_markers(
    ax: Axes,
    candidates: MiniFFTCandidates,
    *,
    db: bool = False,
    floor_db: float = -120.0,
    annotate: bool = True,
    label: str | None = "Candidates",
    color: str = CANDIDATE_COLOR,
    marker_size: float = 36.0,
) -> PathCollection:
    """Mark filled candidate slots and optionally label them by rank."""

    powers = as_1d_array(candidates.powers, "candidates.powers", dtype=float)
    frequencies = as_1d_array(candidates.frequencies, "candidates.frequencies", dtype=float)
    if powers.size != frequencies.size:
        raise ValueError("candidates.powers and candidates.frequencies must have the same length.")

    filled = powers > 0.0
    y = powers[filled]
    if db:
        y = 10.0 * np.log10(np.maximum(y, 10.0 ** (floor_db / 10.0)))

    markers = ax.scatter(frequencies[filled], y, s=marker_size, color=color, zorder=3, label=label)
    if annotate:
        for rank, (x_value, y_value) in enumerate(zip(frequencies[filled], y), start=1):
            ax.annotate(
                str(rank),
                (x_value, y_value),
                textcoords="offset points",
                xytext=(0, 5),
                ha="center",
                fontsize=8,
            )
    return markers


__all__ = ["plot_candidate_markers", "plot_interbinned_powers"]
