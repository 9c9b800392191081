"""Top-K candidate tracking over interbinned power arrays."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from minifft_search.kernels.cache import NUMBETWEEN
from minifft_search.utils.validation import as_1d_array, as_positive_int

CANDIDATE_COLUMNS: tuple[str, ...] = ("rank", "power", "frequency_bins")


@dataclass(frozen=True)
class MiniFFTCandidates:
    """Highest powers and their Fourier frequencies, sorted by decreasing power.

    Frequencies are in mini-FFT bins with half-bin resolution.  Slots that no
    bin qualified for hold ``(0.0, 0.0)``.
    """

    powers: np.ndarray
    frequencies: np.ndarray

    @property
    def num_filled(self) -> int:
        return int(np.count_nonzero(self.powers > 0.0))


def percolate_pows_and_freqs(powers: np.ndarray, frequencies: np.ndarray) -> float:
    """Move the last power/frequency pair up the sorted lists as far as it goes.

    Both arrays are modified in place.  Returns the new lowest power.
    """

    for index in range(powers.size - 2, -1, -1):
        if powers[index] < powers[index + 1]:
            powers[index], powers[index + 1] = powers[index + 1], powers[index]
            frequencies[index], frequencies[index + 1] = frequencies[index + 1], frequencies[index]
        else:
            break
    return float(powers[-1])


class CandidateTracker:
    """Fixed-length list of the highest powers seen so far."""

    def __init__(self, num_candidates: int) -> None:
        self._num_candidates = as_positive_int(num_candidates, "num_candidates")
        self._powers = np.zeros(self._num_candidates, dtype=float)
        self._frequencies = np.zeros(self._num_candidates, dtype=float)
        self._minimum_power = 0.0

    @property
    def num_candidates(self) -> int:
        return self._num_candidates

    @property
    def minimum_power(self) -> float:
        """Power a new candidate must exceed to enter the list."""
        return self._minimum_power

    def reset(self) -> None:
        self._powers.fill(0.0)
        self._frequencies.fill(0.0)
        self._minimum_power = 0.0

    def offer(self, power: float, frequency: float) -> bool:
        """Insert ``(power, frequency)`` if it beats the current minimum."""

        if not power > self._minimum_power:
            return False
        self._powers[-1] = power
        self._frequencies[-1] = frequency
        self._minimum_power = percolate_pows_and_freqs(self._powers, self._frequencies)
        return True

    def candidates(self) -> MiniFFTCandidates:
        return MiniFFTCandidates(powers=self._powers.copy(), frequencies=self._frequencies.copy())


def select_top_candidates(powers: np.ndarray, num_candidates: int) -> MiniFFTCandidates:
    """Return the ``num_candidates`` highest powers and their half-bin frequencies.

    Index 0 (DC) is never a candidate.  Index ``i`` maps to frequency
    ``i / 2``.  Ties keep the lower frequency first.
    """

    values = as_1d_array(powers, "powers", dtype=float)
    tracker = CandidateTracker(num_candidates)
    step = 1.0 / NUMBETWEEN
    for index, power in enumerate(values[1:].tolist(), start=1):
        if power > tracker.minimum_power:
            tracker.offer(power, step * index)
    return tracker.candidates()


def candidates_to_frame(candidates: MiniFFTCandidates, *, drop_empty: bool = False) -> pd.DataFrame:
    """Tabulate candidates as ``rank``, ``power`` and ``frequency_bins`` columns."""

    frame = pd.DataFrame(
        {
            "rank": np.arange(1, candidates.powers.size + 1, dtype=int),
            "power": np.asarray(candidates.powers, dtype=float),
            "frequency_bins": np.asarray(candidates.frequencies, dtype=float),
        },
        columns=list(CANDIDATE_COLUMNS),
    )
    if drop_empty:
        frame = frame.loc[frame["power"] > 0.0].reset_index(drop=True)
    return frame


__all__ = [
    "CANDIDATE_COLUMNS",
    "CandidateTracker",
    "MiniFFTCandidates",
    "candidates_to_frame",
    "percolate_pows_and_freqs",
    "select_top_candidates",
]
