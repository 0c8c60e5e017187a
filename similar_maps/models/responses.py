"""API response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from similar_maps.models.analysis import AnalysisResult
from similar_maps.models.map import LocalMap


class AnalyzeResponse(BaseModel):
    """Response for a duplicate analysis."""

    success: bool = Field(default=True)
    result: AnalysisResult = Field(..., description="Groups and totals")
    group_count: int = Field(..., ge=0, description="Number of similar groups")
    potential_space_saving_text: str = Field(
        ..., description="Human-readable reclaimable size"
    )
    processing_time_ms: float = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "success": True,
                "result": {
                    "groups": [],
                    "total_duplicates": 3,
                    "potential_space_saving": 1050,
                },
                "group_count": 2,
                "potential_space_saving_text": "1 MB",
                "processing_time_ms": 12.4,
            }
        }


class DeletionPlanResponse(BaseModel):
    """Maps an external executor should delete."""

    success: bool = Field(default=True)
    maps: list[LocalMap] = Field(default_factory=list)
    total_size: int = Field(default=0, ge=0, description="Estimated size in KB")
    total_size_text: str = Field(..., description="Human-readable size")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall health status")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "1.0.0",
            }
        }
