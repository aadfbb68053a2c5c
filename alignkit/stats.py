"""
stats.py — Alignment statistics and text formatting

Both functions classify columns the same way:

    gap       either side is the gap symbol
    match     both sides non-gap and identical
    mismatch  both sides non-gap and different

so the marker line printed by format_alignment always agrees with the
counts from calculate_statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .default import DEFAULT_LINE_WIDTH, GAP

MATCH_MARK = "|"
MISMATCH_MARK = "."
GAP_MARK = " "


@dataclass(frozen=True)
class AlignmentStatistics:
    """
    Column counts and percentages for one alignment.

    identity    = matches / length * 100
    similarity  = (matches + mismatches) / length * 100
    gap_percent = gaps / length * 100

    All percentages are 0.0 for a zero-length alignment.
    """

    matches: int
    mismatches: int
    gaps: int
    length: int
    identity: float
    similarity: float
    gap_percent: float

    @classmethod
    def empty(cls) -> "AlignmentStatistics":
        return cls(0, 0, 0, 0, 0.0, 0.0, 0.0)


def _checked_rows(alignment) -> tuple[str, str]:
    if alignment is None:
        raise TypeError("alignment must not be None")
    aligned1, aligned2 = alignment.aligned1, alignment.aligned2
    if len(aligned1) != len(aligned2):
        raise ValueError(
            f"Aligned sequences must have equal length, got {len(aligned1)} and {len(aligned2)}"
        )
    return aligned1, aligned2


def match_markers(aligned1: str, aligned2: str) -> str:
    """
    Return one marker per column: '|' match, '.' mismatch, ' ' gap.
    """
    marks: List[str] = []
    for a, b in zip(aligned1, aligned2):
        if a == GAP or b == GAP:
            marks.append(GAP_MARK)
        elif a == b:
            marks.append(MATCH_MARK)
        else:
            marks.append(MISMATCH_MARK)
    return "".join(marks)


def calculate_statistics(alignment) -> AlignmentStatistics:
    """
    Count matches, mismatches and gap columns of an AlignmentResult
    (or any object with equal-length aligned1 / aligned2 strings).
    """
    aligned1, aligned2 = _checked_rows(alignment)
    length = len(aligned1)
    if length == 0:
        return AlignmentStatistics.empty()

    marks = match_markers(aligned1, aligned2)
    matches = marks.count(MATCH_MARK)
    mismatches = marks.count(MISMATCH_MARK)
    gaps = marks.count(GAP_MARK)

    return AlignmentStatistics(
        matches=matches,
        mismatches=mismatches,
        gaps=gaps,
        length=length,
        identity=matches / length * 100,
        similarity=(matches + mismatches) / length * 100,
        gap_percent=gaps / length * 100,
    )


def format_alignment(alignment, line_width: int = DEFAULT_LINE_WIDTH) -> str:
    """
    Render an alignment as blocks of three lines.

    Each block covers up to line_width columns: the first aligned
    sequence, the marker line, the second aligned sequence, then a
    blank line.  Every line ends with a newline.  An empty alignment
    renders as "".

    Example
    -------
    >>> print(format_alignment(global_align("ACGT", "AGT")), end="")
    ACGT
    | ||
    A-GT
    <BLANKLINE>
    """
    if line_width <= 0:
        raise ValueError(f"line_width must be positive, got {line_width}")
    aligned1, aligned2 = _checked_rows(alignment)

    lines: List[str] = []
    for start in range(0, len(aligned1), line_width):
        row1 = aligned1[start:start + line_width]
        row2 = aligned2[start:start + line_width]
        lines.append(row1)
        lines.append(match_markers(row1, row2))
        lines.append(row2)
        lines.append("")

    return "".join(line + "\n" for line in lines)
