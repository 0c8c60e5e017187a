"""Map scoring and size estimation for ranking versions within a group."""

import math

from similar_maps.models.analysis import SimilarMapGroup
from similar_maps.models.map import LocalMap
from similar_maps.utils.logging import get_logger

logger = get_logger(__name__)

# Default ranking weights
DEFAULT_WEIGHTS = {
    "vote": 2.0,
    "downloads_divisor": 20.0,
    "ranked_bonus": 500.0,
    "curated_bonus": 100.0,
    "verified_uploader_bonus": 50.0,
    "automapper_penalty": 300.0,
    "full_spread_bonus": 100.0,
}

DEFAULT_FULL_SPREAD_MIN_DIFFICULTIES = 5

# Size estimate in KB
DEFAULT_BASE_SIZE_KB = 200
DEFAULT_SIZE_PER_DIFFICULTY_KB = 50


class MapScorer:
    """Scorer for picking the best version of a song within each group."""

    def __init__(
        self,
        weights: dict[str, float] | None = None,
        full_spread_min_difficulties: int = DEFAULT_FULL_SPREAD_MIN_DIFFICULTIES,
        base_size_kb: int = DEFAULT_BASE_SIZE_KB,
        size_per_difficulty_kb: int = DEFAULT_SIZE_PER_DIFFICULTY_KB,
    ):
        """Initialize scorer.

        Args:
            weights: Overrides for the ranking weights
            full_spread_min_difficulties: Difficulty count that earns the spread bonus
            base_size_kb: Estimated size of a map without difficulties
            size_per_difficulty_kb: Estimated size added per difficulty
        """
        self.weights = {**DEFAULT_WEIGHTS, **(weights or {})}
        self.full_spread_min_difficulties = full_spread_min_difficulties
        self.base_size_kb = base_size_kb
        self.size_per_difficulty_kb = size_per_difficulty_kb

    def rank_groups(self, groups: list[SimilarMapGroup]) -> list[SimilarMapGroup]:
        """Score every member, sort each group and mark its best map.

        Groups are updated in place and returned.

        Args:
            groups: Groups to rank

        Returns:
            The same groups with scores, order, recommendation and size set
        """
        for group in groups:
            for item in group.maps:
                item.score = self.score_map(item.map)

            # Stable sort keeps input order between equal scores
            group.maps.sort(key=lambda item: item.score, reverse=True)

            for index, item in enumerate(group.maps):
                item.recommended = index == 0

            group.total_size = sum(self.estimate_map_size(item.map) for item in group.maps)

        return groups

    def score_map(self, local_map: LocalMap) -> float:
        """Calculate the quality score of a single map.

        Args:
            local_map: Map to score

        Returns:
            Score, 0 when the computation is not finite
        """
        score = 0.0
        details = local_map.song_details

        if details:
            up_votes = details.up_votes or 0
            down_votes = details.down_votes or 0
            downloads = details.downloads or 0

            score += (up_votes - down_votes) * self.weights["vote"]
            score += downloads / self.weights["downloads_divisor"]

            # Quality indicators
            if details.ranked or details.bl_ranked:
                score += self.weights["ranked_bonus"]
            if details.curated:
                score += self.weights["curated_bonus"]
            if details.uploader and details.uploader.verified:
                score += self.weights["verified_uploader_bonus"]

            if details.automapper:
                score -= self.weights["automapper_penalty"]

        if len(local_map.info.difficulties) >= self.full_spread_min_difficulties:
            score += self.weights["full_spread_bonus"]

        if not math.isfinite(score):
            logger.warning("non_finite_score_clamped", hash=local_map.hash, path=local_map.path)
            return 0.0

        return score

    def estimate_map_size(self, local_map: LocalMap) -> int:
        """Estimate the on-disk size of a map in KB."""
        return self.base_size_kb + len(local_map.info.difficulties) * self.size_per_difficulty_kb
