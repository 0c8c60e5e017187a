"""Pydantic models for maps, analysis results, requests, and responses."""

from similar_maps.models.analysis import (
    AnalysisResult,
    ScoredMap,
    SimilarityLevel,
    SimilarMapGroup,
)
from similar_maps.models.map import DifficultyTag, LocalMap, MapInfo, SongDetails, Uploader
from similar_maps.models.requests import AnalyzeRequest, DeletionPlanRequest, MapSelection
from similar_maps.models.responses import (
    AnalyzeResponse,
    DeletionPlanResponse,
    HealthResponse,
)

__all__ = [
    "DifficultyTag",
    "LocalMap",
    "MapInfo",
    "SongDetails",
    "Uploader",
    "AnalysisResult",
    "ScoredMap",
    "SimilarityLevel",
    "SimilarMapGroup",
    "AnalyzeRequest",
    "DeletionPlanRequest",
    "MapSelection",
    "AnalyzeResponse",
    "DeletionPlanResponse",
    "HealthResponse",
]
