"""plotting subpackage for mini-FFT search diagnostics."""

from minifft_search.plotting.axes_plots import *  # noqa: F401,F403
from minifft_search.plotting.figure_builders import *  # noqa: F401,F403
from minifft_search.plotting.style import *  # noqa: F401,F403

# Merge __all__ from the submodules.
from minifft_search.plotting.axes_plots import __all__ as _axes_all
from minifft_search.plotting.figure_builders import __all__ as _builders_all
from minifft_search.plotting.style import __all__ as _style_all

__all__ = sorted({*_axes_all, *_builders_all, *_style_all})
