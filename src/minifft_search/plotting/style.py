"""Plot styling for interbinned power spectra and their candidates."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from typing import Iterator

import matplotlib as mpl

POWER_COLOR = "#1f77b4"
SUMMED_COLOR = "#2ca02c"
CANDIDATE_COLOR = "#d62728"

# Half-bin arrays longer than this are drawn with thinning lines.
DENSE_POINT_COUNT = 512
MIN_LINE_WIDTH = 0.4
MAX_LINE_WIDTH = 1.2


def line_width_for(num_points: int | None) -> float:
    """Line width that keeps ``num_points`` half-bin samples legible."""

    if num_points is None or num_points <= DENSE_POINT_COUNT:
        return MAX_LINE_WIDTH
    width = MAX_LINE_WIDTH * (DENSE_POINT_COUNT / float(num_points)) ** 0.5
    return max(MIN_LINE_WIDTH, width)


def get_search_rc_params(
        num_points: int | None = None,
        *,
        overrides: Mapping[str, object] | None = None,
) -> dict[str, object]:
    """Return rcParams for power-vs-frequency plots of ``num_points`` samples."""

    params: dict[str, object] = {
        "axes.prop_cycle": mpl.cycler(color=[POWER_COLOR, SUMMED_COLOR, "#9467bd"]),
        "axes.xmargin": 0.0,
        "axes.formatter.useoffset": False,
        "axes.grid": True,
        "grid.alpha": 0.2,
        "lines.linewidth": line_width_for(num_points),
        "lines.antialiased": True,
        "scatter.marker": "v",
        "scatter.edgecolors": "face",
        "legend.frameon": False,
        "savefig.dpi": 200,
    }
    if overrides:
        params.update(dict(overrides))
    return params


@contextmanager
def search_style_context(
        num_points: int | None = None,
        *,
        overrides: Mapping[str, object] | None = None,
) -> Iterator[None]:
    """Temporarily apply :func:`get_search_rc_params`."""

    with mpl.rc_context(get_search_rc_params(num_points, overrides=overrides)):
        yield


__all__ = [
    "CANDIDATE_COLOR",
    "POWER_COLOR",
    "SUMMED_COLOR",
    "get_search_rc_params",
    "line_width_for",
    "search_style_context",
]
