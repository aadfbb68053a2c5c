"""
aligners.py — User-facing alignment helpers for alignkit

Each function normalizes its inputs, builds a DPInput for its mode,
runs the shared DP driver and returns an AlignmentResult.

The functions here do not change scoring: all three modes use the same
recurrence from dp_core and differ only in boundary and termination
policy.
"""

from __future__ import annotations

from typing import Optional, Union

from .default import DEFAULT_SCORING, GAP
from .dp_core import (
    AlignmentMode,
    AlignmentResult,
    CancelCheck,
    DPInput,
    ProgressCallback,
    run_dp,
)
from .scoring import ScoringModel


def normalize_sequence(seq, name: str = "sequence") -> str:
    """
    Return seq as an upper-case string.

    Accepts str or any object whose str() is the sequence (for example
    a Biopython Seq).  No alphabet validation is done here.
    """
    if seq is None:
        raise TypeError(f"{name} must not be None")
    return str(seq).upper()


def get_aligned_bases(aligned1: str, aligned2: str) -> tuple[str, str]:
    """
    Extracts bases of aligned2 opposite seq1, and bases of aligned1 opposite seq2.

    This projects the alignment onto the coordinates of the unaligned sequences.

    Args:
        aligned1: Aligned first sequence (may contain gaps '-').
        aligned2: Aligned second sequence (may contain gaps '-').

    Returns:
        A tuple (on_seq1, on_seq2) where:
        - on_seq1: The characters of aligned2 at non-gap positions of aligned1
                   (same length as the unaligned seq1).
        - on_seq2: The characters of aligned1 at non-gap positions of aligned2
                   (same length as the unaligned seq2).
    """
    if len(aligned1) != len(aligned2):
        raise ValueError(
            f"Aligned sequences must have equal length, got {len(aligned1)} and {len(aligned2)}"
        )
    on_seq1 = []
    on_seq2 = []
    for a, b in zip(aligned1, aligned2):
        if a != GAP:
            on_seq1.append(b)
        if b != GAP:
            on_seq2.append(a)
    return "".join(on_seq1), "".join(on_seq2)


def _build_input(seq1, seq2, scoring: ScoringModel, mode: AlignmentMode) -> DPInput:
    if scoring is None:
        raise TypeError("scoring must not be None")
    return DPInput(
        seq1=normalize_sequence(seq1, "seq1"),
        seq2=normalize_sequence(seq2, "seq2"),
        scoring=scoring,
        mode=mode,
    )


# ---------------------------------------------------------------------------
# Global (Needleman-Wunsch variant)
# ---------------------------------------------------------------------------

def global_align(
    seq1,
    seq2,
    scoring: ScoringModel = DEFAULT_SCORING,
    *,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> AlignmentResult:
    """
    End-to-end alignment of seq1 and seq2.

    Every input symbol appears exactly once in the result.  Row 0 and
    column 0 charge gap_open once plus gap_extend per step; interior
    gaps cost gap_extend only.

    Parameters
    ----------
    seq1, seq2 : str
        Sequences to align (upper-cased on entry).
    scoring : ScoringModel
        Defaults to SIMPLE_DNA.
    cancel, progress : callable, optional
        Cooperative cancellation check and row-progress callback,
        see dp_core.fill_matrix.

    Returns
    -------
    AlignmentResult
        mode GLOBAL, spanning both inputs; AlignmentResult.empty() if
        either input is empty.
    """
    config = _build_input(seq1, seq2, scoring, AlignmentMode.GLOBAL)
    return run_dp(config, cancel=cancel, progress=progress)


# ---------------------------------------------------------------------------
# Local (Smith-Waterman)
# ---------------------------------------------------------------------------

def local_align(
    seq1,
    seq2,
    scoring: ScoringModel = DEFAULT_SCORING,
    *,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> AlignmentResult:
    """
    Best-scoring substring alignment of seq1 and seq2.

    Cells are floored at zero.  The end cell is the first maximum met in
    a row-major scan; traceback stops at the first zero cell.  start/end
    coordinates cover only the aligned substrings.  Returns
    AlignmentResult.empty(LOCAL) when no positive-scoring pair exists.
    """
    config = _build_input(seq1, seq2, scoring, AlignmentMode.LOCAL)
    return run_dp(config, cancel=cancel, progress=progress)


# ---------------------------------------------------------------------------
# Semi-global (query global, reference ends free)
# ---------------------------------------------------------------------------

def semiglobal_align(
    seq1,
    seq2,
    scoring: ScoringModel = DEFAULT_SCORING,
    *,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> AlignmentResult:
    """
    Align the full query seq1 inside the reference seq2.

    Leading and trailing reference overhang is free; leading query rows
    still pay gap_extend.  The alignment ends at the best cell of the
    last row and the unaligned reference tail is appended as gap
    columns, so both aligned strings span the whole reference.  The
    reported score is score[m, n], the last cell of the full span.
    """
    config = _build_input(seq1, seq2, scoring, AlignmentMode.SEMIGLOBAL)
    return run_dp(config, cancel=cancel, progress=progress)


_ALIGNERS = {
    AlignmentMode.GLOBAL: global_align,
    AlignmentMode.LOCAL: local_align,
    AlignmentMode.SEMIGLOBAL: semiglobal_align,
}


def align(
    seq1,
    seq2,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
    scoring: ScoringModel = DEFAULT_SCORING,
    **kwargs,
) -> AlignmentResult:
    """
    Dispatch to global_align, local_align or semiglobal_align by mode
    ("global", "local", "semiglobal" or an AlignmentMode).
    """
    try:
        mode = AlignmentMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown alignment mode {mode!r}; expected one of "
            f"{[m.value for m in AlignmentMode]}"
        ) from None
    return _ALIGNERS[mode](seq1, seq2, scoring, **kwargs)
