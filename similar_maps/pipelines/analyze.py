"""Duplicate analysis pipeline."""

import asyncio
import threading
import time
from collections.abc import Sequence

from similar_maps.config.settings import Settings
from similar_maps.models.analysis import AnalysisResult, SimilarityLevel
from similar_maps.models.map import LocalMap
from similar_maps.models.requests import AnalyzeRequest
from similar_maps.models.responses import AnalyzeResponse
from similar_maps.ranking.grouping import HashGrouper, SongGrouper
from similar_maps.ranking.scorer import MapScorer
from similar_maps.utils.exceptions import APIError, ValidationError
from similar_maps.utils.formatting import format_kilobytes
from similar_maps.utils.logging import get_logger

logger = get_logger(__name__)


class AnalysisPipeline:
    """Pipeline that finds duplicate maps and recommends which to keep.

    Exact hash groups and fuzzy song groups are built independently from the
    same batch, concatenated (exact first) and ranked together. A map can
    therefore show up in both an exact group and a fuzzy group.
    """

    def __init__(
        self,
        hash_grouper: HashGrouper | None = None,
        song_grouper: SongGrouper | None = None,
        scorer: MapScorer | None = None,
        settings: Settings | None = None,
    ):
        """Initialize analysis pipeline.

        Args:
            hash_grouper: Grouper for exact duplicates
            song_grouper: Grouper for similar songs
            scorer: Scorer ranking versions within each group
            settings: Application settings, used for request limits
        """
        self.hash_grouper = hash_grouper or HashGrouper()
        self.song_grouper = song_grouper or SongGrouper()
        self.scorer = scorer or MapScorer()
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalysisPipeline":
        """Build a pipeline whose components are tuned by settings."""
        return cls(
            hash_grouper=HashGrouper(),
            song_grouper=SongGrouper(
                thresholds={
                    SimilarityLevel.HIGH: settings.similarity_high_threshold,
                    SimilarityLevel.MEDIUM: settings.similarity_medium_threshold,
                    SimilarityLevel.LOW: settings.similarity_low_threshold,
                },
                bpm_tolerance=settings.bpm_tolerance,
                bpm_tolerance_ratio=settings.bpm_tolerance_ratio,
                duration_tolerance_seconds=settings.duration_tolerance_seconds,
                duration_tolerance_ratio=settings.duration_tolerance_ratio,
            ),
            scorer=MapScorer(
                weights=settings.score_weights,
                full_spread_min_difficulties=settings.full_spread_min_difficulties,
                base_size_kb=settings.size_base_kb,
                size_per_difficulty_kb=settings.size_per_difficulty_kb,
            ),
            settings=settings,
        )

    def run(
        self,
        maps: Sequence[LocalMap],
        cancel_event: threading.Event | None = None,
    ) -> AnalysisResult:
        """Analyze a batch of maps.

        Args:
            maps: Maps to analyze, in load order
            cancel_event: Set by the caller to abandon the run early

        Returns:
            Ranked groups with duplicate and space saving totals

        Raises:
            AnalysisCancelledError: If cancel_event was set during song grouping
        """
        hash_groups = self.hash_grouper.group(maps)
        song_groups = self.song_grouper.group(maps, cancel_event)

        groups = self.scorer.rank_groups(hash_groups + song_groups)

        total_duplicates = 0
        potential_space_saving = 0
        for group in groups:
            for item in group.maps:
                if item.recommended:
                    continue
                total_duplicates += 1
                potential_space_saving += self.scorer.estimate_map_size(item.map)

        logger.info(
            "analysis_completed",
            maps=len(maps),
            exact_groups=len(hash_groups),
            similar_groups=len(song_groups),
            total_duplicates=total_duplicates,
            potential_space_saving_kb=potential_space_saving,
        )

        return AnalysisResult(
            groups=groups,
            total_duplicates=total_duplicates,
            potential_space_saving=potential_space_saving,
        )

    async def execute(self, request: AnalyzeRequest) -> AnalyzeResponse:
        """Validate a request and run the analysis off the event loop.

        On timeout the worker thread is told to stop and winds down at the
        next seed of song grouping.

        Args:
            request: Analysis request

        Returns:
            Analysis response

        Raises:
            ValidationError: If the batch is too large or has repeated paths
            APIError: If the analysis exceeds the configured timeout
        """
        start_time = time.perf_counter()
        self.validate(request.maps)

        timeout = self.settings.analysis_timeout_seconds if self.settings else None
        cancel_event = threading.Event()
        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(self.run, request.maps, cancel_event),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error("analysis_timeout", maps=len(request.maps), timeout_seconds=timeout)
            raise APIError(
                f"Analysis did not finish within {timeout} seconds",
                status_code=504,
                error_code="ANALYSIS_TIMEOUT",
                details={"maps": len(request.maps)},
            ) from e
        finally:
            # Stops an abandoned worker; no-op once the run has returned
            cancel_event.set()

        processing_time_ms = (time.perf_counter() - start_time) * 1000

        return AnalyzeResponse(
            success=True,
            result=result,
            group_count=len(result.groups),
            potential_space_saving_text=format_kilobytes(result.potential_space_saving),
            processing_time_ms=processing_time_ms,
        )

    def validate(self, maps: Sequence[LocalMap]) -> None:
        """Reject batches the analysis should not be run on.

        Raises:
            ValidationError: If the batch is invalid
        """
        if self.settings and len(maps) > self.settings.max_batch_size:
            raise ValidationError(
                f"Too many maps: {len(maps)} (max {self.settings.max_batch_size})",
                field="maps",
                details={"count": len(maps), "max_batch_size": self.settings.max_batch_size},
            )

        seen_paths: set[str] = set()
        for index, local_map in enumerate(maps):
            if local_map.path in seen_paths:
                raise ValidationError(
                    f"Map path listed more than once: {local_map.path}",
                    field=f"maps[{index}].path",
                    details={"path": local_map.path},
                )
            seen_paths.add(local_map.path)
