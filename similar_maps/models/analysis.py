"""Analysis result models."""

from enum import Enum

from pydantic import BaseModel, Field

from similar_maps.models.map import LocalMap


class SimilarityLevel(str, Enum):
    """How confidently the maps of a group represent the same song."""

    EXACT = "exact"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScoredMap(BaseModel):
    """A map together with its ranking inside a group."""

    map: LocalMap
    score: float = Field(default=0.0, description="Quality score")
    recommended: bool = Field(default=False, description="Version to keep")


class SimilarMapGroup(BaseModel):
    """Two or more maps judged to be versions of the same song."""

    song_name: str | None = Field(default=None, description="Song title of the first member")
    author_name: str | None = Field(default=None, description="Artist of the first member")
    maps: list[ScoredMap] = Field(..., min_length=2, description="Members, best first")
    total_size: int = Field(default=0, ge=0, description="Estimated size of all members in KB")
    similarity: SimilarityLevel


class AnalysisResult(BaseModel):
    """Outcome of a duplicate analysis."""

    groups: list[SimilarMapGroup] = Field(default_factory=list)
    total_duplicates: int = Field(default=0, ge=0, description="Non-recommended maps")
    potential_space_saving: int = Field(
        default=0, ge=0, description="Estimated size of non-recommended maps in KB"
    )
