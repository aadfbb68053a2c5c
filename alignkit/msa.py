"""
msa.py — Reference-star multiple alignment

The first sequence is the reference.  Every other sequence is globally
aligned against it and only its own aligned row is kept; the reference
contributes its unaligned text as row 0.  Rows are then right-padded
with gaps to a common width and a majority-vote consensus is called.

This is a naive approximation: gap columns inserted independently in
different pairwise runs are not reconciled, so the rows are not a
jointly consistent multiple alignment.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .aligners import global_align, normalize_sequence
from .default import DEFAULT_SCORING, DNA_BASES, GAP
from .dp_core import CancelCheck, ProgressCallback
from .scoring import ScoringModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultipleAlignmentResult:
    """
    Rows of a star alignment plus their consensus.

    Attributes
    ----------
    rows : tuple of str
        One row per input sequence, in input order, all the same length.
    consensus : str
        Majority symbol per column (see consensus_sequence).
    total_score : int
        Sum of the pairwise global scores used to build the rows.
    """
    rows: Tuple[str, ...]
    consensus: str
    total_score: int

    @classmethod
    def empty(cls) -> "MultipleAlignmentResult":
        return cls((), "", 0)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def pad_rows(rows: Sequence[str], gap: str = GAP) -> List[str]:
    """Right-pad every row with gap to the length of the longest row."""
    width = max((len(r) for r in rows), default=0)
    return [r.ljust(width, gap) for r in rows]


def consensus_sequence(rows: Sequence[str]) -> str:
    """
    Majority vote over A/C/G/T for each column of equal-length rows.

    Gaps and any other symbol are not counted.  Ties go to the base
    listed first in DNA_BASES; a column with no A/C/G/T yields GAP.
    """
    width = max((len(r) for r in rows), default=0)
    out: List[str] = []
    for pos in range(width):
        counts = Counter(r[pos] for r in rows if pos < len(r) and r[pos] in DNA_BASES)
        if not counts:
            out.append(GAP)
            continue
        # max keeps the first of equal counts, so order DNA_BASES explicitly
        out.append(max(DNA_BASES, key=lambda base: counts[base]))
    return "".join(out)


def multiple_align(
    sequences: Iterable,
    scoring: ScoringModel = DEFAULT_SCORING,
    *,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> MultipleAlignmentResult:
    """
    Star-align sequences against the first one.

    Parameters
    ----------
    sequences : iterable of str
        Ordered input; the first item is the reference.
    scoring : ScoringModel
        Used for every pairwise global alignment.
    cancel : callable, optional
        Passed to each pairwise alignment.
    progress : callable, optional
        Called with the fraction of non-reference sequences aligned.

    Returns
    -------
    MultipleAlignmentResult
        empty() for no input; a single input is returned as the only row
        and as the consensus with score 0.
    """
    if sequences is None:
        raise TypeError("sequences must not be None")
    if scoring is None:
        raise TypeError("scoring must not be None")
    seqs = [normalize_sequence(s, f"sequences[{k}]") for k, s in enumerate(sequences)]

    if not seqs:
        return MultipleAlignmentResult.empty()
    reference = seqs[0]
    if len(seqs) == 1:
        return MultipleAlignmentResult((reference,), reference, 0)

    rows = [reference]
    total_score = 0
    others = seqs[1:]
    for k, seq in enumerate(others, start=1):
        result = global_align(reference, seq, scoring, cancel=cancel)
        rows.append(result.aligned2)
        total_score += result.score
        logger.debug("Row %d aligned to reference with score %d", k, result.score)
        if progress is not None:
            progress(k / len(others))

    rows = pad_rows(rows)
    return MultipleAlignmentResult(
        rows=tuple(rows),
        consensus=consensus_sequence(rows),
        total_score=total_score,
    )
