"""
default.py — Default parameters for alignkit

Provides the gap symbol, the DNA alphabet used for consensus calling and
the named scoring presets used throughout examples and tests.
"""

from .scoring import ScoringModel

# Gap symbol shared by every aligned string
GAP = "-"

# DNA alphabet, in consensus tie-break order
DNA_BASES = ("A", "C", "G", "T")

# Width of one block in format_alignment
DEFAULT_LINE_WIDTH = 60

## Scoring presets
# +1 match, -1 mismatch
SIMPLE_DNA = ScoringModel(match=1, mismatch=-1, gap_open=-2, gap_extend=-1)

# BLAST blastn-style scoring: +2 match, -3 mismatch
BLAST_DNA = ScoringModel(match=2, mismatch=-3, gap_open=-5, gap_extend=-2)

# Closely related sequences
HIGH_IDENTITY_DNA = ScoringModel(match=5, mismatch=-4, gap_open=-10, gap_extend=-1)

DEFAULT_SCORING = SIMPLE_DNA

PRESETS = {
    "simple": SIMPLE_DNA,
    "blast": BLAST_DNA,
    "high_identity": HIGH_IDENTITY_DNA,
}


def get_scoring(name: str = "simple") -> ScoringModel:
    """
    Look up a scoring preset by name ("simple", "blast", "high_identity").
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scoring preset {name!r}; expected one of {sorted(PRESETS)}"
        ) from None


def align_params(preset: str = "simple", **overrides) -> dict:
    """
    Bundle a scoring preset into a dict for easy unpacking.

    Parameters:
        preset (str): Name of the preset in PRESETS.
        overrides: Keyword arguments passed through unchanged
            (e.g. cancel=..., progress=...).

    Usage:
        result = global_align(X, Y, **align_params("blast"))"""
    params = {"scoring": get_scoring(preset)}
    params.update(overrides)
    return params
