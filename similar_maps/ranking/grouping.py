"""Grouping of maps into exact and fuzzy duplicate groups."""

import threading
from collections.abc import Sequence

from similar_maps.models.analysis import ScoredMap, SimilarityLevel, SimilarMapGroup
from similar_maps.models.map import LocalMap
from similar_maps.ranking.normalization import TextNormalizer
from similar_maps.ranking.similarity import SimilarityMatcher
from similar_maps.utils.exceptions import AnalysisCancelledError
from similar_maps.utils.logging import get_logger

logger = get_logger(__name__)

# Default similarity tiers (exclusive lower bounds)
DEFAULT_THRESHOLDS = {
    SimilarityLevel.HIGH: 0.9,
    SimilarityLevel.MEDIUM: 0.8,
    SimilarityLevel.LOW: 0.7,
}

DEFAULT_BPM_TOLERANCE = 10.0
DEFAULT_BPM_TOLERANCE_RATIO = 0.1
DEFAULT_DURATION_TOLERANCE_SECONDS = 15.0
DEFAULT_DURATION_TOLERANCE_RATIO = 0.15


class HashGrouper:
    """Groups maps that share the same content hash."""

    def group(self, maps: Sequence[LocalMap]) -> list[SimilarMapGroup]:
        """Build one exact group per hash that occurs more than once.

        Args:
            maps: Maps to group

        Returns:
            Exact groups, in order of first occurrence
        """
        by_hash: dict[str, list[LocalMap]] = {}
        for local_map in maps:
            by_hash.setdefault(local_map.hash, []).append(local_map)

        groups: list[SimilarMapGroup] = []
        for hash_maps in by_hash.values():
            if len(hash_maps) <= 1:
                continue

            groups.append(
                SimilarMapGroup(
                    song_name=hash_maps[0].info.song_name,
                    author_name=hash_maps[0].info.song_author_name,
                    maps=[ScoredMap(map=m) for m in hash_maps],
                    similarity=SimilarityLevel.EXACT,
                )
            )

        logger.debug("hash_groups_found", count=len(groups), maps=len(maps))
        return groups


class SongGrouper:
    """Groups different maps of what looks like the same song.

    Single greedy pass: each map not yet grouped becomes a seed and pulls in
    every later, ungrouped map close enough to it. Grouping is not
    transitive, so A~B and B~C does not put A and C together unless C also
    matches A.
    """

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        matcher: SimilarityMatcher | None = None,
        thresholds: dict[SimilarityLevel, float] | None = None,
        bpm_tolerance: float = DEFAULT_BPM_TOLERANCE,
        bpm_tolerance_ratio: float = DEFAULT_BPM_TOLERANCE_RATIO,
        duration_tolerance_seconds: float = DEFAULT_DURATION_TOLERANCE_SECONDS,
        duration_tolerance_ratio: float = DEFAULT_DURATION_TOLERANCE_RATIO,
    ):
        """Initialize grouper.

        Args:
            normalizer: Builds comparison keys from title and artist
            matcher: Scores similarity between two keys
            thresholds: Lower bounds of the high/medium/low tiers
            bpm_tolerance: Absolute BPM difference tolerated
            bpm_tolerance_ratio: BPM difference tolerated relative to the seed
            duration_tolerance_seconds: Absolute duration difference tolerated
            duration_tolerance_ratio: Duration difference tolerated relative to the seed
        """
        self.normalizer = normalizer or TextNormalizer()
        self.matcher = matcher or SimilarityMatcher()
        self.thresholds = thresholds or DEFAULT_THRESHOLDS.copy()
        self.bpm_tolerance = bpm_tolerance
        self.bpm_tolerance_ratio = bpm_tolerance_ratio
        self.duration_tolerance_seconds = duration_tolerance_seconds
        self.duration_tolerance_ratio = duration_tolerance_ratio

    def group(
        self,
        maps: Sequence[LocalMap],
        cancel_event: threading.Event | None = None,
    ) -> list[SimilarMapGroup]:
        """Build fuzzy groups of maps with similar song name and artist.

        Args:
            maps: Maps to group, in input order
            cancel_event: Checked before each seed; once set, grouping stops

        Returns:
            Groups with at least two members, all labelled high

        Raises:
            AnalysisCancelledError: If cancel_event was set
        """
        groups: list[SimilarMapGroup] = []
        clustered_hashes: set[str] = set()
        keys = [self.normalizer.normalize(m.info.song_name, m.info.song_author_name) for m in maps]
        min_similarity = min(self.thresholds.values())

        for i, seed in enumerate(maps):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("similar_song_grouping_cancelled", processed=i, maps=len(maps))
                raise AnalysisCancelledError(
                    "Song grouping cancelled", details={"processed": i, "maps": len(maps)}
                )

            if seed.hash in clustered_hashes:
                continue

            members = [ScoredMap(map=seed)]
            clustered_hashes.add(seed.hash)

            for offset, similarity in self.matcher.candidates(
                keys[i], keys[i + 1 :], min_similarity
            ):
                candidate = maps[i + 1 + offset]
                if candidate.hash in clustered_hashes:
                    continue

                level = self.similarity_level(similarity)
                if level is None:
                    continue

                if self._is_corroborated(seed, candidate, level):
                    members.append(ScoredMap(map=candidate))
                    clustered_hashes.add(candidate.hash)

            if len(members) > 1:
                # Group label stays high whatever tiers the members matched at
                groups.append(
                    SimilarMapGroup(
                        song_name=seed.info.song_name,
                        author_name=seed.info.song_author_name,
                        maps=members,
                        similarity=SimilarityLevel.HIGH,
                    )
                )

        logger.debug("similar_song_groups_found", count=len(groups), maps=len(maps))
        return groups

    def similarity_level(self, similarity: float) -> SimilarityLevel | None:
        """Map a similarity score to its tier, or None when it is no match."""
        for level in (SimilarityLevel.HIGH, SimilarityLevel.MEDIUM, SimilarityLevel.LOW):
            if similarity > self.thresholds[level]:
                return level
        return None

    def _is_corroborated(
        self,
        seed: LocalMap,
        candidate: LocalMap,
        level: SimilarityLevel,
    ) -> bool:
        """Check tempo and duration against a text match.

        A contradicting signal rejects medium and low matches. High matches
        are kept regardless, since remixes often change tempo and length.
        """
        if level == SimilarityLevel.HIGH:
            return True

        if self._bpm_contradicts(seed, candidate):
            return False

        return not self._duration_contradicts(seed, candidate)

    def _bpm_contradicts(self, seed: LocalMap, candidate: LocalMap) -> bool:
        seed_bpm = seed.info.beats_per_minute
        candidate_bpm = candidate.info.beats_per_minute
        if not seed_bpm or not candidate_bpm:
            return False

        bpm_diff = abs(seed_bpm - candidate_bpm)
        return bpm_diff > self.bpm_tolerance and bpm_diff / seed_bpm > self.bpm_tolerance_ratio

    def _duration_contradicts(self, seed: LocalMap, candidate: LocalMap) -> bool:
        seed_duration = seed.song_details.duration if seed.song_details else None
        candidate_duration = candidate.song_details.duration if candidate.song_details else None
        if not seed_duration or not candidate_duration:
            return False

        threshold = max(
            self.duration_tolerance_seconds,
            seed_duration * self.duration_tolerance_ratio,
        )
        return abs(seed_duration - candidate_duration) > threshold
