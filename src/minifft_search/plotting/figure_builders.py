"""OOP figure builders that use GridSpec for search diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from minifft_search.analysis.candidates import MiniFFTCandidates
from minifft_search.plotting.axes_plots import plot_candidate_markers, plot_interbinned_powers
from minifft_search.plotting.style import SUMMED_COLOR, search_style_context


@dataclass
class MiniFFTSearchFigureBuilder:
    """GridSpec builder for interbinned powers + harmonic-summed powers with candidates."""

    figsize: tuple[float, float] = (10.0, 7.0)
    db: bool = False

    def build(
        self,
        interbinned_powers: np.ndarray,
        candidates: MiniFFTCandidates,
        *,
        summed_powers: np.ndarray | None = None,
        harmonics: int = 1,
        style_overrides: Mapping[str, object] | None = None,
    ) -> tuple[Figure, dict[str, Axes]]:
        """Build the figure; candidates are drawn on the power array they came from."""

        num_points = max(np.size(interbinned_powers), 0 if summed_powers is None else np.size(summed_powers))
        with search_style_context(num_points, overrides=style_overrides):
            figure = plt.figure(figsize=self.figsize)
            if summed_powers is None:
                ax_main = figure.add_subplot(1, 1, 1)
                plot_interbinned_powers(ax_main, interbinned_powers, db=self.db, title="Interbinned Powers")
                plot_candidate_markers(ax_main, candidates, db=self.db)
                ax_main.legend(loc="best")
                return figure, {"main": ax_main}

            grid = figure.add_gridspec(2, 1, height_ratios=[1.0, 1.0], hspace=0.35)
            ax_main = figure.add_subplot(grid[0, 0])
            ax_summed = figure.add_subplot(grid[1, 0])

            plot_interbinned_powers(ax_main, interbinned_powers, db=self.db, title="Interbinned Powers")
            plot_interbinned_powers(
                ax_summed,
                summed_powers,
                db=self.db,
                color=SUMMED_COLOR,
                title=f"Harmonic Sum ({harmonics} harmonics, aliased)",
            )
            plot_candidate_markers(ax_summed, candidates, db=self.db)
            ax_summed.legend(loc="best")
            return figure, {"main": ax_main, "summed": ax_summed}


__all__ = ["MiniFFTSearchFigureBuilder"]
