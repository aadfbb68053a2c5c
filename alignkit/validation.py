"""
validation.py — independent baselines and regression checks for alignkit

This module provides plain-Python reimplementations of the alignment
scores (no numpy, no shared code with dp_core), a brute-force local
score, a column-wise rescoring of finished alignments, and small helpers
for randomized tests.

The goals are:

  1. Verify that global_align / semiglobal_align report the same score
     as an independent implementation of the same recurrence.

  2. Verify that local_align returns

         S_local(s, t) = max(0, max_{s' ⊆ s, t' ⊆ t} L(s', t'))

     where s', t' range over non-empty substrings and L is the global
     score with every gap column charged gap_extend and no gap_open.

  3. Verify that every returned alignment is well formed and that
     its score can be recomputed from the aligned strings alone.
"""

from typing import List, Tuple

import numpy as np

from .default import DNA_BASES, GAP
from .dp_core import AlignmentMode
from .scoring import ScoringModel


# ---------------------------------------------------------------------------
# Independent score baselines
# ---------------------------------------------------------------------------

def _score_table(a: str, b: str, scoring: ScoringModel, row0, col0) -> List[List[int]]:
    m, n = len(a), len(b)
    ge = scoring.gap_extend
    F = [[0] * (n + 1) for _ in range(m + 1)]
    for j in range(n + 1):
        F[0][j] = row0(j)
    for i in range(m + 1):
        F[i][0] = col0(i)
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            s = scoring.match if a[i - 1] == b[j - 1] else scoring.mismatch
            F[i][j] = max(F[i - 1][j - 1] + s, F[i - 1][j] + ge, F[i][j - 1] + ge)
    return F


def global_score(a: str, b: str, scoring: ScoringModel) -> int:
    """Global score with gap_open charged once on each boundary."""
    boundary = scoring.boundary_score
    F = _score_table(a, b, scoring, boundary, boundary)
    return F[len(a)][len(b)]


def _semiglobal_table(a: str, b: str, scoring: ScoringModel) -> List[List[int]]:
    ge = scoring.gap_extend
    return _score_table(a, b, scoring, lambda j: 0, lambda i: i * ge)


def semiglobal_score(a: str, b: str, scoring: ScoringModel) -> int:
    """Last-row, last-column cell with a free leading reference (row 0 = 0)."""
    return _semiglobal_table(a, b, scoring)[len(a)][len(b)]


def semiglobal_best_score(a: str, b: str, scoring: ScoringModel) -> int:
    """
    Maximum of the last row: the score of the traced semi-global
    alignment with its trailing reference overhang left free.
    """
    return max(_semiglobal_table(a, b, scoring)[len(a)])


def linear_global_score(a: str, b: str, scoring: ScoringModel) -> int:
    """Global score with every gap column charged gap_extend, no gap_open."""
    ge = scoring.gap_extend
    F = _score_table(a, b, scoring, lambda j: j * ge, lambda i: i * ge)
    return F[len(a)][len(b)]


def local_score_bruteforce(s: str, t: str, scoring: ScoringModel) -> int:
    """
    Maximum of linear_global_score over all pairs of non-empty
    substrings of s and t, floored at zero.  Quartic in the lengths;
    meant for short inputs only.
    """
    best = 0
    for a0 in range(len(s)):
        for a1 in range(a0 + 1, len(s) + 1):
            for b0 in range(len(t)):
                for b1 in range(b0 + 1, len(t) + 1):
                    score = linear_global_score(s[a0:a1], t[b0:b1], scoring)
                    if score > best:
                        best = score
    return best


# ---------------------------------------------------------------------------
# Alignment validity helpers
# ---------------------------------------------------------------------------

def rescore_alignment(result, scoring: ScoringModel) -> int:
    """
    Recompute the score of an AlignmentResult from its aligned strings.

    Every gap column costs gap_extend and every other column its pair
    score.  Global alignments that start with a gap column add gap_open
    once (the boundary charge).  Semi-global alignments do not charge
    the leading and trailing reference overhang (runs of GAP in
    aligned1 at either end), so the result is the score of the traced
    path, semiglobal_best_score, rather than the reported score[m, n].
    """
    a1, a2 = result.aligned1, result.aligned2
    lo, hi = 0, len(a1)
    total = 0
    if result.mode is AlignmentMode.SEMIGLOBAL:
        while lo < hi and a1[lo] == GAP:
            lo += 1
        while hi > lo and a1[hi - 1] == GAP:
            hi -= 1
    elif result.mode is AlignmentMode.GLOBAL and a1 and (a1[0] == GAP or a2[0] == GAP):
        total += scoring.gap_open

    for x, y in zip(a1[lo:hi], a2[lo:hi]):
        if x == GAP or y == GAP:
            total += scoring.gap_extend
        else:
            total += scoring.pair_score(x, y)
    return total


def check_alignment_validity(
    result,
    seq1: str,
    seq2: str,
    scoring: ScoringModel,
) -> Tuple[bool, str]:
    """
    Check that an AlignmentResult is well formed.

    Verifies that aligned1 and aligned2:
    - Have the same length
    - Don't have simultaneous gaps at any position
    - Reduce to the aligned input spans once gaps are removed
    - Carry a score equal to rescore_alignment (for semi-global: the
      rescored path equals semiglobal_best_score and the reported score
      equals semiglobal_score)

    Returns
    -------
    valid : bool
        True if the alignment passes all checks.
    message : str
        Description of what was checked or what failed.
    """
    a1, a2 = result.aligned1, result.aligned2
    if len(a1) != len(a2):
        return False, f"Length mismatch: aligned1={len(a1)}, aligned2={len(a2)}"

    for i, (x, y) in enumerate(zip(a1, a2)):
        if x == GAP and y == GAP:
            return False, f"Double gap found in alignment at position {i}"

    if not result.is_empty:
        span1 = seq1[result.start1:result.end1 + 1]
        span2 = seq2[result.start2:result.end2 + 1]
        if a1.replace(GAP, "") != span1:
            return False, f"aligned1 does not reduce to {span1!r}"
        if a2.replace(GAP, "") != span2:
            return False, f"aligned2 does not reduce to {span2!r}"

    computed = rescore_alignment(result, scoring)
    if result.mode is AlignmentMode.SEMIGLOBAL and not result.is_empty:
        best = semiglobal_best_score(seq1, seq2, scoring)
        if computed != best:
            return False, f"Path score mismatch: computed {computed}, best last-row cell {best}"
        expected = semiglobal_score(seq1, seq2, scoring)
        if expected != result.score:
            return False, f"Score mismatch: expected {expected}, reported {result.score}"
    elif computed != result.score:
        return False, f"Score mismatch: computed {computed}, reported {result.score}"

    return True, f"Valid alignment of length {len(a1)}"


# ---------------------------------------------------------------------------
# Random sequence generation
# ---------------------------------------------------------------------------

def random_dna(length: int, rng: np.random.Generator) -> str:
    """
    Generate a random DNA string of a given length.

    Parameters
    ----------
    length : int
        Length of the DNA string to generate.
    rng : np.random.Generator
        NumPy random generator instance.
    """
    return "".join(rng.choice(DNA_BASES, size=length))


def mutate_sequence(
    seq: str,
    rng: np.random.Generator,
    sub_rate: float = 0.1,
    indel_rate: float = 0.05,
) -> str:
    """
    Apply random substitutions, insertions and deletions to a DNA sequence.

    Parameters
    ----------
    seq : str
        Input DNA sequence.
    rng : numpy random generator
        Random number generator (e.g., np.random.default_rng(seed)).
    sub_rate : float
        Per-base substitution probability (default 0.1).
    indel_rate : float
        Per-base insertion/deletion probability (default 0.05).
    """
    result = []
    for base in seq:
        if rng.random() < indel_rate:
            continue
        if rng.random() < sub_rate:
            base = rng.choice([b for b in DNA_BASES if b != base])
        result.append(str(base))
        if rng.random() < indel_rate:
            result.append(str(rng.choice(DNA_BASES)))
    return "".join(result)
