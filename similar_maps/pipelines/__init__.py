"""Pipeline orchestration module."""

from similar_maps.pipelines.analyze import AnalysisPipeline
from similar_maps.pipelines.deletion import DeletionPlanner, plan_deletion

__all__ = ["AnalysisPipeline", "DeletionPlanner", "plan_deletion"]
