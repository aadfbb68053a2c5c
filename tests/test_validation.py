"""
test_validation.py — Tests for the reference scorers and validity checks

The plain-Python scorers in alignkit.validation are used by the other
test modules as baselines, so they get their own hand-checked cases.
"""

import pytest

from alignkit import AlignmentMode, AlignmentResult, global_align, local_align, semiglobal_align
from alignkit.validation import (
    check_alignment_validity,
    global_score,
    linear_global_score,
    local_score_bruteforce,
    mutate_sequence,
    random_dna,
    rescore_alignment,
    semiglobal_best_score,
    semiglobal_score,
)


class TestReferenceScorers:

    def test_global_score(self, scoring):
        assert global_score("ACGT", "AGT", scoring) == 2
        assert global_score("ACGT", "TTACGTTT", scoring) == -2

    def test_semiglobal_score(self, scoring):
        assert semiglobal_score("ACGT", "TTACGTTT", scoring) == 2
        assert semiglobal_best_score("ACGT", "TTACGTTT", scoring) == 4
        assert semiglobal_score("ACGT", "TTACGT", scoring) == 4

    def test_linear_global_ignores_gap_open(self, scoring):
        # only differs from global_score when a boundary gap is used
        assert linear_global_score("A", "AAA", scoring) == -1
        assert global_score("A", "AAA", scoring) == -1
        assert linear_global_score("", "AA", scoring) == -2
        assert global_score("", "AA", scoring) == -4

    def test_local_bruteforce(self, scoring):
        assert local_score_bruteforce("TTTACGTTT", "GGACGTGG", scoring) == 4
        assert local_score_bruteforce("AAAA", "TTTT", scoring) == 0


class TestAlignmentValidity:

    def test_valid_results(self, scoring):
        for result, (s1, s2) in [
            (global_align("ACGT", "AGT", scoring), ("ACGT", "AGT")),
            (local_align("TTTACGTTT", "GGACGTGG", scoring), ("TTTACGTTT", "GGACGTGG")),
            (semiglobal_align("ACGT", "TTACGTTT", scoring), ("ACGT", "TTACGTTT")),
        ]:
            valid, msg = check_alignment_validity(result, s1, s2, scoring)
            assert valid, msg

    def test_wrong_score_detected(self, scoring):
        result = AlignmentResult("ACGT", "ACGT", 3, AlignmentMode.GLOBAL, 0, 0, 3, 3)
        valid, msg = check_alignment_validity(result, "ACGT", "ACGT", scoring)
        assert not valid
        assert "Score mismatch" in msg

    def test_semiglobal_best_cell_score_rejected(self, scoring):
        result = AlignmentResult("--ACGT--", "TTACGTTT", 4, AlignmentMode.SEMIGLOBAL,
                                 0, 0, 3, 7)
        valid, msg = check_alignment_validity(result, "ACGT", "TTACGTTT", scoring)
        assert not valid
        assert "Score mismatch" in msg

    def test_double_gap_detected(self, scoring):
        result = AlignmentResult("A-C", "A-C", 2, AlignmentMode.GLOBAL, 0, 0, 1, 1)
        valid, msg = check_alignment_validity(result, "AC", "AC", scoring)
        assert not valid
        assert "Double gap" in msg

    def test_length_mismatch_detected(self, scoring):
        result = AlignmentResult("ACG", "AC", 2, AlignmentMode.GLOBAL, 0, 0, 2, 1)
        valid, _ = check_alignment_validity(result, "ACG", "AC", scoring)
        assert not valid

    def test_rescore_leading_boundary_gap(self, scoring):
        result = global_align("A", "GA", scoring)
        assert result.aligned1 == "-A"
        assert rescore_alignment(result, scoring) == result.score == -2


class TestMutation:

    def test_random_dna(self, rng):
        s = random_dna(50, rng)
        assert len(s) == 50
        assert set(s) <= set("ACGT")

    def test_no_mutation(self, rng):
        assert mutate_sequence("ACGTACGT", rng, sub_rate=0.0, indel_rate=0.0) == "ACGTACGT"

    @pytest.mark.parametrize("length", [30, 80])
    def test_mutated_pairs_align_validly(self, any_scoring, rng_alt, length):
        reference = random_dna(length, rng_alt)
        query = mutate_sequence(reference, rng_alt)
        for align_fn in (global_align, local_align, semiglobal_align):
            result = align_fn(query, reference, any_scoring)
            valid, msg = check_alignment_validity(result, query, reference, any_scoring)
            assert valid, f"{align_fn.__name__}: {msg}"
