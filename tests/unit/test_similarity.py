"""Tests for string similarity."""

import pytest

from similar_maps.ranking.similarity import SimilarityMatcher, levenshtein_distance


class TestLevenshteinDistance:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("", "", 0),
            ("abc", "", 3),
            ("", "abc", 3),
            ("abc", "abc", 0),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("foo x", "foo y", 1),
        ],
    )
    def test_distance(self, left, right, expected):
        """Test known distances."""
        assert levenshtein_distance(left, right) == expected


class TestSimilarityMatcher:
    """Tests for SimilarityMatcher."""

    @pytest.fixture
    def matcher(self):
        """Create matcher."""
        return SimilarityMatcher()

    def test_identical_strings(self, matcher):
        """Test identical keys score 1.0."""
        assert matcher.similarity("song artist", "song artist") == 1.0

    def test_empty_strings(self, matcher):
        """Test two empty keys score 1.0 instead of dividing by zero."""
        assert matcher.similarity("", "") == 1.0

    def test_one_empty_string(self, matcher):
        """Test an empty key is completely different from a non-empty one."""
        assert matcher.similarity("abc", "") == 0.0

    def test_ratio_of_longest_length(self, matcher):
        """Test similarity divides distance by the longer key."""
        assert matcher.similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_separator_space_counts(self, matcher):
        """Test the separator between title and artist is compared too."""
        assert matcher.similarity("ab c", "abc ") == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "left,right",
        [
            ("foo x", "foo y"),
            ("kitten", "sitting"),
            ("", "abc"),
            ("some song artist", "some other song"),
        ],
    )
    def test_symmetric(self, matcher, left, right):
        """Test similarity does not depend on argument order."""
        assert matcher.similarity(left, right) == matcher.similarity(right, left)

    def test_bounded(self, matcher):
        """Test similarity stays within [0, 1]."""
        for left, right in [("a", "zzzzzz"), ("abc", "abd"), ("x", "x")]:
            assert 0.0 <= matcher.similarity(left, right) <= 1.0

    def test_candidates_filtered_by_min_similarity(self, matcher):
        """Test candidates yields indexes and exact scores of close keys only."""
        choices = ["kitten", "zzzzzz", "kittens", "sitting"]

        result = list(matcher.candidates("kitten", choices, 0.5))

        assert result == [(0, 1.0), (2, pytest.approx(1 - 1 / 7)), (3, pytest.approx(1 - 3 / 7))]

    def test_candidates_match_similarity(self, matcher):
        """Test scores from candidates equal the pairwise similarity."""
        choices = ["aaaaaaaaaa bbbbbbbcc", "aaaaaaaaaa bbbbccccc", "aaaaaaaaaa zzzzzzzzz"]

        for index, score in matcher.candidates("aaaaaaaaaa bbbbbbbbb", choices, 0.0):
            assert score == matcher.similarity("aaaaaaaaaa bbbbbbbbb", choices[index])

    def test_candidates_empty_choices(self, matcher):
        """Test nothing is yielded without choices."""
        assert list(matcher.candidates("abc", [], 0.7)) == []
