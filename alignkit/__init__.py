"""
alignkit: pairwise and reference-star sequence alignment.
"""

# =============================================================================
# SCORING
# =============================================================================

from .scoring import ScoringModel

from .default import (
    GAP,
    SIMPLE_DNA,
    BLAST_DNA,
    HIGH_IDENTITY_DNA,
    DEFAULT_SCORING,
    PRESETS,
    get_scoring,
    align_params,
)

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .dp_core import (
    AlignmentMode,
    AlignmentResult,
    AlignmentCancelled,
    DPInput,
    TRACEBACK_ORDER,
    fill_matrix,
    run_dp,
)

from .aligners import (
    global_align,
    local_align,
    semiglobal_align,
    align,
    get_aligned_bases,
)

# =============================================================================
# STATISTICS, FORMATTING AND MULTIPLE ALIGNMENT
# =============================================================================

from .stats import (
    AlignmentStatistics,
    calculate_statistics,
    format_alignment,
)

from .msa import (
    MultipleAlignmentResult,
    multiple_align,
    consensus_sequence,
)

# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install alignkit[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "alignkit[plot]"'
    )

try:
    from .plot import plot_score_matrix
    PLOT_AVAILABLE = True
except ImportError:
    # Raises ImportError if accessed without matplotlib/seaborn
    def plot_score_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_score_matrix")
    PLOT_AVAILABLE = False


__version__ = "0.1.0"

__all__ = [
    # Scoring
    "ScoringModel",
    "GAP",
    "SIMPLE_DNA",
    "BLAST_DNA",
    "HIGH_IDENTITY_DNA",
    "DEFAULT_SCORING",
    "PRESETS",
    "get_scoring",
    "align_params",
    # DP core
    "AlignmentMode",
    "AlignmentResult",
    "AlignmentCancelled",
    "DPInput",
    "TRACEBACK_ORDER",
    "fill_matrix",
    "run_dp",
    # Aligners
    "global_align",
    "local_align",
    "semiglobal_align",
    "align",
    "get_aligned_bases",
    # Statistics and formatting
    "AlignmentStatistics",
    "calculate_statistics",
    "format_alignment",
    # Multiple alignment
    "MultipleAlignmentResult",
    "multiple_align",
    "consensus_sequence",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_score_matrix",
]
