"""
scoring.py — Scoring model for alignkit

A ScoringModel is the four integer parameters shared by every alignment
mode: a reward for identical symbols, a penalty for differing symbols,
and the two gap parameters.  Named presets live in default.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringModel:
    """
    Integer scoring parameters for the alignment DP.

    Attributes
    ----------
    match : int
        Score added for a column with identical symbols (usually >= 0).

    mismatch : int
        Score added for a column with differing symbols (usually < 0).

    gap_open : int
        One-time charge applied when a global alignment first leaves the
        origin along row 0 or column 0.  It is never charged for gaps
        opened in the interior of the matrix.

    gap_extend : int
        Charge for every gap column, on the boundary and in the interior.
    """

    match: int
    mismatch: int
    gap_open: int
    gap_extend: int

    def pair_score(self, a: str, b: str) -> int:
        """Return match if a == b, else mismatch."""
        return self.match if a == b else self.mismatch

    def boundary_score(self, k: int) -> int:
        """
        Global boundary value for k gap steps out of the origin:
        k * gap_extend, plus gap_open once for k > 0.
        """
        return k * self.gap_extend + (self.gap_open if k > 0 else 0)
