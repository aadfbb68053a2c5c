"""
test_semiglobal.py — Tests for semi-global (query in reference) alignment
"""

from alignkit import AlignmentMode, fill_matrix, semiglobal_align
from alignkit.dp_core import DPInput
from alignkit.validation import (
    check_alignment_validity,
    rescore_alignment,
    semiglobal_best_score,
    semiglobal_score,
)


class TestSemiGlobalFixed:

    def test_query_inside_reference(self, scoring):
        result = semiglobal_align("ACGT", "TTACGTTT", scoring)
        assert result.mode is AlignmentMode.SEMIGLOBAL
        assert result.aligned1 == "--ACGT--"
        assert result.aligned2 == "TTACGTTT"
        # traced path scores 4 at (4, 6); the reported cell (4, 8) holds 2
        assert result.score == 2

    def test_score_is_last_cell_of_full_span(self, any_scoring):
        result = semiglobal_align("ACGT", "TTACGTTT", any_scoring)
        score = fill_matrix(DPInput("ACGT", "TTACGTTT", any_scoring, AlignmentMode.SEMIGLOBAL))
        assert result.score == score[4, 8]
        assert result.score == semiglobal_score("ACGT", "TTACGTTT", any_scoring)

    def test_traced_path_scores_best_last_row_cell(self, scoring):
        result = semiglobal_align("ACGT", "TTACGTTT", scoring)
        assert rescore_alignment(result, scoring) == 4
        assert semiglobal_best_score("ACGT", "TTACGTTT", scoring) == 4

    def test_no_trailing_overhang(self, scoring):
        """Best cell is (m, n), so path and reported score agree."""
        result = semiglobal_align("ACGT", "TTACGT", scoring)
        assert result.aligned1 == "--ACGT"
        assert result.score == 4

    def test_coordinates_span_inputs(self, scoring):
        result = semiglobal_align("ACGT", "TTACGTTT", scoring)
        assert (result.start1, result.end1) == (0, 3)
        assert (result.start2, result.end2) == (0, 7)

    def test_first_maximum_of_last_row_wins(self, scoring):
        """Columns 1 and 2 of the last row both score 1; column 1 is used."""
        result = semiglobal_align("A", "AA", scoring)
        assert result.aligned1 == "A-"
        assert result.aligned2 == "AA"
        assert result.score == 1

    def test_query_rows_still_pay_gap_extend(self, scoring):
        """Column 0 is charged gap_extend per row, without gap_open."""
        result = semiglobal_align("AC", "C", scoring)
        assert result.aligned1 == "AC"
        assert result.aligned2 == "-C"
        assert result.score == scoring.gap_extend + scoring.match

    def test_empty_input(self):
        result = semiglobal_align("", "ACGT")
        assert result.is_empty
        assert result.mode is AlignmentMode.SEMIGLOBAL


class TestSemiGlobalProperties:

    def test_rows_cover_whole_inputs(self, scoring, rng, random_dna_factory):
        for _ in range(20):
            X = random_dna_factory(int(rng.integers(1, 10)), rng)
            Y = random_dna_factory(int(rng.integers(5, 30)), rng)
            result = semiglobal_align(X, Y, scoring)
            assert len(result.aligned1) == len(result.aligned2)
            assert result.aligned1.replace("-", "") == X
            assert result.aligned2.replace("-", "") == Y

    def test_random_matches_baseline(self, any_scoring, rng_alt, random_dna_factory):
        for nX, nY in [(4, 20), (8, 30), (10, 10), (12, 6)]:
            X = random_dna_factory(nX, rng_alt)
            Y = random_dna_factory(nY, rng_alt)
            result = semiglobal_align(X, Y, any_scoring)
            assert result.score == semiglobal_score(X, Y, any_scoring)
            valid, msg = check_alignment_validity(result, X, Y, any_scoring)
            assert valid, msg
