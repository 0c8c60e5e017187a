"""Deletion planning over analysed duplicate groups."""

from collections.abc import Iterable, Sequence

from similar_maps.models.analysis import SimilarMapGroup
from similar_maps.models.map import LocalMap
from similar_maps.models.requests import DeletionPlanRequest, MapSelection
from similar_maps.models.responses import DeletionPlanResponse
from similar_maps.ranking.scorer import MapScorer
from similar_maps.utils.exceptions import ValidationError
from similar_maps.utils.formatting import format_kilobytes
from similar_maps.utils.logging import get_logger

logger = get_logger(__name__)


def plan_deletion(
    groups: Sequence[SimilarMapGroup],
    selected_groups: Iterable[int] = (),
    selected_maps: Iterable[MapSelection] = (),
) -> list[LocalMap]:
    """Resolve a selection into the list of maps to delete.

    A selected group contributes all of its non-recommended maps. Selecting a
    single map inside a selected group excludes it again. A map selected in a
    group that is not selected is deleted even when it is the recommended one.

    Args:
        groups: Analysed groups
        selected_groups: Indexes of selected groups
        selected_maps: Individually selected maps

    Returns:
        Maps to delete, each path listed once

    Raises:
        ValidationError: If a selection points outside the groups
    """
    group_indexes = set(selected_groups)
    map_positions = {(s.group_index, s.map_index) for s in selected_maps}

    for group_index in group_indexes:
        if not 0 <= group_index < len(groups):
            raise ValidationError(
                f"Selected group {group_index} does not exist",
                field="selected_groups",
                details={"group_count": len(groups)},
            )
    for group_index, map_index in map_positions:
        in_range = 0 <= group_index < len(groups) and 0 <= map_index < len(
            groups[group_index].maps
        )
        if not in_range:
            raise ValidationError(
                f"Selected map {group_index}/{map_index} does not exist",
                field="selected_maps",
            )

    to_delete: list[LocalMap] = []
    for group_index, group in enumerate(groups):
        group_selected = group_index in group_indexes
        for map_index, item in enumerate(group.maps):
            map_selected = (group_index, map_index) in map_positions
            if group_selected:
                if not map_selected and not item.recommended:
                    to_delete.append(item.map)
            elif map_selected:
                to_delete.append(item.map)

    # Maps in both an exact and a fuzzy group are only deleted once
    seen_paths: set[str] = set()
    unique: list[LocalMap] = []
    for local_map in to_delete:
        if local_map.path in seen_paths:
            continue
        seen_paths.add(local_map.path)
        unique.append(local_map)

    return unique


class DeletionPlanner:
    """Builds deletion plans for an external deletion executor."""

    def __init__(self, scorer: MapScorer | None = None):
        """Initialize planner.

        Args:
            scorer: Scorer used for size estimates
        """
        self.scorer = scorer or MapScorer()

    def execute(self, request: DeletionPlanRequest) -> DeletionPlanResponse:
        """Resolve the request's selection and estimate the space it frees."""
        maps = plan_deletion(request.groups, request.selected_groups, request.selected_maps)
        total_size = sum(self.scorer.estimate_map_size(m) for m in maps)

        logger.info("deletion_planned", maps=len(maps), total_size_kb=total_size)

        return DeletionPlanResponse(
            success=True,
            maps=maps,
            total_size=total_size,
            total_size_text=format_kilobytes(total_size),
        )
