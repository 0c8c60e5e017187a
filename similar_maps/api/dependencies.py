"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends

from similar_maps.config.settings import Settings, get_settings
from similar_maps.pipelines.analyze import AnalysisPipeline
from similar_maps.pipelines.deletion import DeletionPlanner
from similar_maps.ranking.scorer import MapScorer


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_analysis_pipeline(settings: SettingsDep) -> AnalysisPipeline:
    """Build an analysis pipeline for the current request."""
    return AnalysisPipeline.from_settings(settings)


def get_deletion_planner(settings: SettingsDep) -> DeletionPlanner:
    """Build a deletion planner sharing the configured size estimate."""
    return DeletionPlanner(
        scorer=MapScorer(
            base_size_kb=settings.size_base_kb,
            size_per_difficulty_kb=settings.size_per_difficulty_kb,
        )
    )


# Type aliases for dependency injection
AnalysisPipelineDep = Annotated[AnalysisPipeline, Depends(get_analysis_pipeline)]
DeletionPlannerDep = Annotated[DeletionPlanner, Depends(get_deletion_planner)]
