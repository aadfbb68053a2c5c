"""
dp_core.py — alignkit dynamic programming core

This module implements the single-matrix alignment DP shared by the
three alignment modes.  The fill recurrence is the same everywhere:

    score[i, j] = max(diag, up, left)

    diag = score[i-1, j-1] + (match if seq1[i-1] == seq2[j-1] else mismatch)
    up   = score[i-1, j]   + gap_extend      (gap in seq2)
    left = score[i, j-1]   + gap_extend      (gap in seq1)

gap_open is only ever charged on the global boundary (row 0 / column 0),
never for a gap opened in the interior.  The modes differ in how the
boundary is initialized, whether cells are floored at zero, where
traceback starts and where it stops.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .default import GAP
from .scoring import ScoringModel

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]
ProgressCallback = Callable[[float], None]

# Traceback preference when several moves reproduce a cell's score
TRACEBACK_ORDER = ("diag", "up", "left")


class AlignmentMode(str, Enum):
    """Boundary and termination policy of an alignment run."""

    GLOBAL = "global"
    LOCAL = "local"
    SEMIGLOBAL = "semiglobal"


class AlignmentCancelled(RuntimeError):
    """Raised when a cancel check asks a running alignment to stop."""


# ---------------------------------------------------------------------------
# Input and output containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DPInput:
    """
    Configuration for a single alignment DP run.

    Attributes
    ----------
    seq1, seq2 : str
        Row (m) and column (n) sequences, already upper-cased.

    scoring : ScoringModel
        Match/mismatch rewards and gap parameters.

    mode : AlignmentMode
        Selects boundary initialization, zero flooring, end-cell
        selection and traceback termination.
    """

    seq1: str
    seq2: str
    scoring: ScoringModel
    mode: AlignmentMode = AlignmentMode.GLOBAL

    def __post_init__(self):
        object.__setattr__(self, "mode", AlignmentMode(self.mode))

    def pair_score(self, i: int, j: int) -> int:
        """
        Return the substitution score for DP indices i, j (1-based),
        i.e. for symbols seq1[i-1] and seq2[j-1].
        """
        return self.scoring.pair_score(self.seq1[i - 1], self.seq2[j - 1])


@dataclass(frozen=True)
class AlignmentResult:
    """
    Result of one pairwise alignment.

    Attributes
    ----------
    aligned1, aligned2 : str
        Aligned sequences of equal length, using GAP for gap columns.

    score : int
        Alignment score under the scoring model used.

    mode : AlignmentMode
        Mode that produced the alignment.

    start1, start2, end1, end2 : int
        0-based inclusive span of the alignment in seq1 / seq2.  Global
        and semi-global alignments always report the full inputs; local
        alignments report only the aligned substrings.
    """

    aligned1: str
    aligned2: str
    score: int
    mode: AlignmentMode
    start1: int
    start2: int
    end1: int
    end2: int

    def __post_init__(self):
        object.__setattr__(self, "mode", AlignmentMode(self.mode))

    def __len__(self) -> int:
        return len(self.aligned1)

    @classmethod
    def empty(cls, mode: AlignmentMode = AlignmentMode.GLOBAL) -> "AlignmentResult":
        """The designated empty result: no columns, score 0, zero coordinates."""
        return cls("", "", 0, AlignmentMode(mode), 0, 0, 0, 0)

    @property
    def is_empty(self) -> bool:
        return not self.aligned1

    def to_tuple(self) -> Tuple[str, str, int]:
        """(aligned1, aligned2, score)"""
        return (self.aligned1, self.aligned2, self.score)


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------

def _init_global(config: DPInput, score: NDArray[np.int64]) -> None:
    # k * gap_extend + gap_open, gap_open charged once when leaving the origin
    ge, gs = config.scoring.gap_extend, config.scoring.gap_open
    m, n = score.shape[0] - 1, score.shape[1] - 1
    score[1:, 0] = gs + np.arange(1, m + 1) * ge
    score[0, 1:] = gs + np.arange(1, n + 1) * ge


def _init_local(config: DPInput, score: NDArray[np.int64]) -> None:
    # all boundary cells stay at zero
    return None


def _init_semiglobal(config: DPInput, score: NDArray[np.int64]) -> None:
    # leading query rows still pay gap_extend, leading reference is free
    ge = config.scoring.gap_extend
    m = score.shape[0] - 1
    score[1:, 0] = np.arange(1, m + 1) * ge


_BOUNDARY_INIT = {
    AlignmentMode.GLOBAL: _init_global,
    AlignmentMode.LOCAL: _init_local,
    AlignmentMode.SEMIGLOBAL: _init_semiglobal,
}


def init_matrix(config: DPInput) -> NDArray[np.int64]:
    """
    Allocate the (m+1, n+1) score matrix and fill row 0 / column 0
    according to config.mode.
    """
    m, n = len(config.seq1), len(config.seq2)
    score = np.zeros((m + 1, n + 1), dtype=np.int64)
    _BOUNDARY_INIT[config.mode](config, score)
    return score


# ---------------------------------------------------------------------------
# Fill
# ---------------------------------------------------------------------------

def cell_update(config: DPInput, score: NDArray[np.int64], i: int, j: int) -> None:
    """
    Fill score[i, j] from its three predecessors.  Local mode floors the
    value at zero.
    """
    ge = config.scoring.gap_extend
    diag = score[i - 1, j - 1] + config.pair_score(i, j)
    up   = score[i - 1, j] + ge
    left = score[i, j - 1] + ge

    best = max(diag, up, left)
    if config.mode is AlignmentMode.LOCAL and best < 0:
        best = 0
    score[i, j] = best


def fill_matrix(
    config: DPInput,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> NDArray[np.int64]:
    """
    Build and fill the score matrix for config.

    Parameters
    ----------
    config : DPInput
        Sequences, scoring model and mode.
    cancel : callable, optional
        Checked once before each row; if it returns True the fill stops
        with AlignmentCancelled.
    progress : callable, optional
        Called with the fraction of rows completed after each row.

    Returns
    -------
    score : (m+1, n+1) array of int64
        A fresh matrix owned by the caller.
    """
    m, n = len(config.seq1), len(config.seq2)
    logger.debug("Filling %s score matrix of shape (%d, %d)", config.mode.value, m + 1, n + 1)
    score = init_matrix(config)

    for i in range(1, m + 1):
        if cancel is not None and cancel():
            logger.info("Alignment cancelled at row %d of %d", i, m)
            raise AlignmentCancelled(f"Alignment cancelled at row {i} of {m}")
        for j in range(1, n + 1):
            cell_update(config, score, i, j)
        if progress is not None:
            progress(i / m)

    return score


# ---------------------------------------------------------------------------
# End-cell selection
# ---------------------------------------------------------------------------

def _end_global(config: DPInput, score: NDArray[np.int64]) -> Tuple[int, int]:
    return score.shape[0] - 1, score.shape[1] - 1


def _end_local(config: DPInput, score: NDArray[np.int64]) -> Tuple[int, int]:
    # argmax over the flattened matrix is the first maximum in row-major
    # order; an all-zero matrix gives (0, 0)
    i, j = np.unravel_index(int(np.argmax(score)), score.shape)
    return int(i), int(j)


def _end_semiglobal(config: DPInput, score: NDArray[np.int64]) -> Tuple[int, int]:
    # first maximum of the last row, scanning j = 0..n
    m = score.shape[0] - 1
    return m, int(np.argmax(score[m]))


_END_CELL = {
    AlignmentMode.GLOBAL: _end_global,
    AlignmentMode.LOCAL: _end_local,
    AlignmentMode.SEMIGLOBAL: _end_semiglobal,
}


def select_end_cell(config: DPInput, score: NDArray[np.int64]) -> Tuple[int, int]:
    """Return the (i, j) cell traceback starts from for config.mode."""
    return _END_CELL[config.mode](config, score)


# ---------------------------------------------------------------------------
# Traceback
# ---------------------------------------------------------------------------

def choose_move(config: DPInput, score: NDArray[np.int64], i: int, j: int) -> str:
    """
    Pick the predecessor move at (i, j) following TRACEBACK_ORDER:
    diagonal if it reproduces score[i, j], else up if j == 0 or it
    reproduces the cell, else left.
    """
    ge = config.scoring.gap_extend
    if i > 0 and j > 0 and score[i, j] == score[i - 1, j - 1] + config.pair_score(i, j):
        return "diag"
    if i > 0 and (j == 0 or score[i, j] == score[i - 1, j] + ge):
        return "up"
    return "left"


def traceback(
    config: DPInput,
    score: NDArray[np.int64],
    end_i: int,
    end_j: int,
) -> Tuple[str, str, int, int, List[Tuple[int, int]]]:
    """
    Recover the alignment ending at (end_i, end_j) from a filled matrix.

    Global and semi-global traceback runs to (0, 0).  Local traceback
    stops at the first cell with value 0 or on the matrix edge.  For
    semi-global, reference symbols after end_j are emitted first (in
    reverse) as trailing columns with GAP in the query row.

    Returns
    -------
    aligned1, aligned2 : str
        Aligned sequences.
    start_i, start_j : int
        DP indices of the first aligned cell (1-based).  For local
        alignments this is the last cell visited before stopping.
    path : list of (i, j)
        Cells visited, from the start of the alignment to its end.
    """
    seq1, seq2 = config.seq1, config.seq2
    local = config.mode is AlignmentMode.LOCAL

    aln1: List[str] = []
    aln2: List[str] = []
    path: List[Tuple[int, int]] = []

    if config.mode is AlignmentMode.SEMIGLOBAL:
        for k in range(len(seq2), end_j, -1):
            aln1.append(GAP)
            aln2.append(seq2[k - 1])
            path.append((end_i, k))

    i, j = end_i, end_j
    start_i, start_j = end_i, end_j
    while True:
        if local:
            if i == 0 or j == 0 or score[i, j] == 0:
                break
        elif i == 0 and j == 0:
            break

        path.append((i, j))
        start_i, start_j = i, j
        move = choose_move(config, score, i, j)
        if move == "diag":
            aln1.append(seq1[i - 1])
            aln2.append(seq2[j - 1])
            i -= 1
            j -= 1
        elif move == "up":
            aln1.append(seq1[i - 1])
            aln2.append(GAP)
            i -= 1
        else:
            aln1.append(GAP)
            aln2.append(seq2[j - 1])
            j -= 1

    if not local:
        path.append((0, 0))
    path.reverse()
    aln1.reverse()
    aln2.reverse()
    return "".join(aln1), "".join(aln2), start_i, start_j, path


# ---------------------------------------------------------------------------
# Top-level driver
# ---------------------------------------------------------------------------

def run_dp(
    config: DPInput,
    cancel: Optional[CancelCheck] = None,
    progress: Optional[ProgressCallback] = None,
) -> AlignmentResult:
    """
    Fill, select the end cell and trace back for a given DPInput.

    Returns AlignmentResult.empty(config.mode) if either sequence is
    empty, or for a local alignment with no positive-scoring cell.
    """
    m, n = len(config.seq1), len(config.seq2)
    if m == 0 or n == 0:
        return AlignmentResult.empty(config.mode)

    score = fill_matrix(config, cancel=cancel, progress=progress)
    end_i, end_j = select_end_cell(config, score)
    # semi-global reports the last cell of the full reference span, not the
    # best cell of the last row
    if config.mode is AlignmentMode.SEMIGLOBAL:
        final_score = int(score[m, n])
    else:
        final_score = int(score[end_i, end_j])
    logger.debug("Traceback from (%d, %d) with score %d", end_i, end_j, final_score)

    if config.mode is AlignmentMode.LOCAL and final_score == 0:
        return AlignmentResult.empty(AlignmentMode.LOCAL)

    aligned1, aligned2, start_i, start_j, _ = traceback(config, score, end_i, end_j)

    if config.mode is AlignmentMode.LOCAL:
        return AlignmentResult(
            aligned1=aligned1,
            aligned2=aligned2,
            score=final_score,
            mode=config.mode,
            start1=start_i - 1,
            start2=start_j - 1,
            end1=end_i - 1,
            end2=end_j - 1,
        )
    return AlignmentResult(
        aligned1=aligned1,
        aligned2=aligned2,
        score=final_score,
        mode=config.mode,
        start1=0,
        start2=0,
        end1=m - 1,
        end2=n - 1,
    )
