"""
DP score matrix visualization for alignkit.

Functions:
    - plot_score_matrix: heatmap of the filled score matrix for one mode,
      with the traceback path overlaid
"""

import matplotlib.pyplot as plt
import seaborn as sns
from typing import Dict, Optional, Tuple, Union

from ..aligners import normalize_sequence
from ..default import DEFAULT_SCORING
from ..dp_core import AlignmentMode, DPInput, fill_matrix, select_end_cell, traceback
from ..scoring import ScoringModel
from .colors import NT_COLOR, PATH_COLORS, HEATMAP_COLORMAPS

grid_color_map = HEATMAP_COLORMAPS['diverging']


def plot_score_matrix(
    seq1: str,
    seq2: str,
    scoring: ScoringModel = DEFAULT_SCORING,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
    ax: Optional[plt.Axes] = None,
    nt_color_map: Optional[Dict[str, str]] = None,
    figsize: Tuple[int, int] = (8, 6),
    annotate: bool = True,
    show_path: bool = True,
    marker_size: int = 18,
    marker_width: int = 2,
    marker_style: str = "s",
    colormap: str = grid_color_map,
) -> plt.Figure:
    """
    Plot the filled DP score matrix of (seq1, seq2) as a heatmap with
    the traceback path overlaid.

    The matrix is recomputed here with dp_core.fill_matrix; it is the
    same matrix the aligners build and discard.

    Parameters
    ----------
    seq1 : str
        Row sequence.
    seq2 : str
        Column sequence.
    scoring : ScoringModel
        Scoring model (default SIMPLE_DNA).
    mode : AlignmentMode or str
        "global", "local" or "semiglobal".
    ax : matplotlib Axes, optional
        Axes to draw into; a new figure is created if omitted.
    nt_color_map : dict, optional
        Mapping nucleotides to colors for axis labels
    annotate : bool
        Write cell values into the heatmap.
    show_path : bool
        Mark the traceback cells; the end cell gets its own color.

    Returns
    -------
    fig : matplotlib.Figure
    """
    if nt_color_map is None:
        nt_color_map = NT_COLOR

    config = DPInput(
        seq1=normalize_sequence(seq1, "seq1"),
        seq2=normalize_sequence(seq2, "seq2"),
        scoring=scoring,
        mode=mode,
    )
    if not config.seq1 or not config.seq2:
        raise ValueError("plot_score_matrix requires two non-empty sequences")

    score = fill_matrix(config)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cmap = sns.color_palette(colormap, as_cmap=True)
    xticklabels = [""] + list(config.seq2)
    yticklabels = [""] + list(config.seq1)

    sns.heatmap(
        score.astype(float),
        ax=ax,
        cmap=cmap,
        center=0,
        square=True,
        cbar=False,
        annot=annotate,
        fmt=".0f",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    ax.set_title(f"{config.mode.value} score matrix")
    ax.set_xlabel("seq2 (columns)")
    ax.set_ylabel("seq1 (rows)")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")

    for tick, lab in zip(ax.get_xticklabels(), xticklabels):
        tick.set_rotation(0)
        tick.set_va("center")
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")
    for tick, lab in zip(ax.get_yticklabels(), yticklabels):
        tick.set_rotation(0)
        tick.set_va("center")
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")

    if show_path:
        end_i, end_j = select_end_cell(config, score)
        if config.mode is AlignmentMode.LOCAL and score[end_i, end_j] == 0:
            path = []
        else:
            _, _, _, _, path = traceback(config, score, end_i, end_j)

        for (i, j) in path:
            x = j + 0.5
            y = i + 0.5
            ax.plot(
                x,
                y,
                marker=marker_style,
                markersize=marker_size,
                markeredgecolor=PATH_COLORS["background"],
                markerfacecolor="none",
                alpha=0.6,
                markeredgewidth=marker_width + 1,
            )
            edge = PATH_COLORS["end_cell"] if (i, j) == (end_i, end_j) else PATH_COLORS["path"]
            ax.plot(
                x,
                y,
                marker=marker_style,
                markersize=marker_size,
                markeredgecolor=edge,
                markerfacecolor="none",
                alpha=0.9,
                markeredgewidth=marker_width,
            )

    fig.tight_layout()
    return fig

