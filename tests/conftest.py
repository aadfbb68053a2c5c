"""
conftest.py — Shared pytest fixtures for the alignkit test suite

Provides scoring presets, random number generators and a random DNA
factory used across all test modules.
"""

import pytest
import numpy as np

from alignkit.default import DNA_BASES, SIMPLE_DNA, BLAST_DNA, HIGH_IDENTITY_DNA
from alignkit.scoring import ScoringModel


# ---------------------------------------------------------------------------
# Scoring fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def scoring() -> ScoringModel:
    """+1 match, -1 mismatch, gap open -2, gap extend -1."""
    return SIMPLE_DNA


@pytest.fixture(params=["simple", "blast", "high_identity"])
def any_scoring(request) -> ScoringModel:
    """Each of the named presets in turn."""
    return {
        "simple": SIMPLE_DNA,
        "blast": BLAST_DNA,
        "high_identity": HIGH_IDENTITY_DNA,
    }[request.param]


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_dna_factory():
    """Factory fixture returning a function to generate random DNA strings."""
    def _random_dna(length: int, rng: np.random.Generator) -> str:
        return "".join(rng.choice(DNA_BASES, size=length))
    return _random_dna
