"""
test_global.py — Tests for global alignment

Verifies fixed cases, the boundary-only gap_open charge, diagonal-first
tie-breaking, and agreement with the independent baseline in
alignkit.validation on random input.
"""

import pytest

from alignkit import AlignmentMode, AlignmentResult, global_align
from alignkit.validation import check_alignment_validity, global_score


class TestGlobalFixed:
    """Hand-checked global alignments under SIMPLE_DNA."""

    def test_identical(self, scoring):
        result = global_align("ACGT", "ACGT", scoring)
        assert result.aligned1 == "ACGT"
        assert result.aligned2 == "ACGT"
        assert result.score == 4
        assert result.mode is AlignmentMode.GLOBAL

    def test_single_interior_gap(self, scoring):
        """3 matches + one gap_extend; gap_open is not charged mid-alignment."""
        result = global_align("ACGT", "AGT", scoring)
        assert result.aligned1 == "ACGT"
        assert result.aligned2 == "A-GT"
        assert len(result) == 4
        assert result.score == 3 * scoring.match + scoring.gap_extend

    def test_single_mismatch_beats_gaps(self, scoring):
        result = global_align("A", "T", scoring)
        assert (result.aligned1, result.aligned2, result.score) == ("A", "T", -1)

    def test_trailing_gaps(self, scoring):
        result = global_align("ACGT", "ACGTAA", scoring)
        assert result.aligned1 == "ACGT--"
        assert result.aligned2 == "ACGTAA"
        assert result.score == 2

    def test_diagonal_preferred_on_tie(self, scoring):
        """At (3, 2) diag and up both reproduce the cell; diag wins."""
        result = global_align("AAA", "AA", scoring)
        assert result.aligned1 == "AAA"
        assert result.aligned2 == "A-A"
        assert result.score == 1

    def test_coordinates_span_inputs(self, scoring):
        result = global_align("ACGTAC", "AGT", scoring)
        assert (result.start1, result.end1) == (0, 5)
        assert (result.start2, result.end2) == (0, 2)

    def test_lowercase_input_is_normalized(self, scoring):
        result = global_align("acgt", "ACGT", scoring)
        assert result.aligned1 == "ACGT"
        assert result.score == 4


class TestGlobalEdgeCases:

    @pytest.mark.parametrize("seq1,seq2", [("", "ACGT"), ("ACGT", ""), ("", "")])
    def test_empty_input_returns_empty_result(self, seq1, seq2):
        assert global_align(seq1, seq2) == AlignmentResult.empty(AlignmentMode.GLOBAL)

    def test_none_sequence_raises(self):
        with pytest.raises(TypeError):
            global_align(None, "ACGT")
        with pytest.raises(TypeError):
            global_align("ACGT", None)

    def test_none_scoring_raises(self):
        with pytest.raises(TypeError):
            global_align("ACGT", "ACGT", None)


class TestGlobalProperties:
    """Properties that hold for every global alignment."""

    def test_self_alignment(self, any_scoring, rng, random_dna_factory):
        for length in [1, 5, 17]:
            s = random_dna_factory(length, rng)
            result = global_align(s, s, any_scoring)
            assert result.score == length * any_scoring.match
            assert result.aligned1 == result.aligned2 == s

    def test_ungapped_recovers_original(self, scoring, rng, random_dna_factory):
        for _ in range(20):
            X = random_dna_factory(int(rng.integers(1, 25)), rng)
            Y = random_dna_factory(int(rng.integers(1, 25)), rng)
            result = global_align(X, Y, scoring)
            assert len(result.aligned1) == len(result.aligned2)
            assert result.aligned1.replace("-", "") == X
            assert result.aligned2.replace("-", "") == Y

    def test_random_matches_baseline(self, any_scoring, rng_alt, random_dna_factory):
        for nX, nY in [(5, 5), (10, 20), (30, 15), (3, 12)]:
            X = random_dna_factory(nX, rng_alt)
            Y = random_dna_factory(nY, rng_alt)
            result = global_align(X, Y, any_scoring)
            assert result.score == global_score(X, Y, any_scoring)
            valid, msg = check_alignment_validity(result, X, Y, any_scoring)
            assert valid, msg
