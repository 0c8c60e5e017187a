"""String similarity based on Levenshtein distance."""

from collections.abc import Iterator, Sequence

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

# Margin below the cutoff passed to rapidfuzz; candidates are re-scored exactly
_CUTOFF_SLACK = 1e-6


class SimilarityMatcher:
    """Scores how close two normalized keys are, from 0.0 to 1.0."""

    def similarity(self, left: str, right: str) -> float:
        """Calculate similarity as 1 - distance / longest length.

        Args:
            left: First normalized key
            right: Second normalized key

        Returns:
            Similarity score (1.0 means identical)
        """
        max_length = max(len(left), len(right))
        if max_length == 0:
            return 1.0

        return 1 - levenshtein_distance(left, right) / max_length

    def candidates(
        self,
        query: str,
        choices: Sequence[str],
        min_similarity: float,
    ) -> Iterator[tuple[int, float]]:
        """Yield choices that may score above min_similarity against query.

        The scan over choices runs inside rapidfuzz. Survivors are re-scored
        with similarity(), so callers compare exact values.

        Args:
            query: Key to compare against
            choices: Keys to scan
            min_similarity: Exclusive lower bound callers care about

        Yields:
            (index into choices, similarity) in choice order
        """
        cutoff = max(min_similarity - _CUTOFF_SLACK, 0.0)
        for choice, _, index in process.extract_iter(
            query,
            choices,
            scorer=Levenshtein.normalized_similarity,
            processor=None,
            score_cutoff=cutoff,
        ):
            yield index, self.similarity(query, choice)


def levenshtein_distance(left: str, right: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions."""
    return Levenshtein.distance(left, right)
