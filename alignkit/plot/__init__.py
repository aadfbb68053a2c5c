"""
alignkit plotting package.

Requires matplotlib and seaborn (pip install "alignkit[plot]").

Submodules:
    - plot.colors: Color constants for all visualization
    - plot.matrix: DP score matrix heatmaps

Example imports:
    from alignkit.plot import plot_score_matrix  # top-level re-export
    from alignkit.plot.colors import NT_COLOR  # color constants
"""

from .colors import (
    NT_COLOR,
    PATH_COLORS,
    HEATMAP_COLORMAPS,
)

from .matrix import plot_score_matrix


__all__ = [
    "NT_COLOR",
    "PATH_COLORS",
    "HEATMAP_COLORMAPS",
    "plot_score_matrix",
]
