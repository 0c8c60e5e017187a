"""API request models."""

from typing import Annotated

from pydantic import BaseModel, Field

from similar_maps.models.analysis import SimilarMapGroup
from similar_maps.models.map import LocalMap


class AnalyzeRequest(BaseModel):
    """Request for a duplicate analysis of a map collection."""

    maps: list[LocalMap] = Field(
        default_factory=list,
        description="Maps to analyze, in the order they were loaded",
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "maps": [
                    {
                        "hash": "abc123",
                        "path": "CustomLevels/1a2b (Foo - Mapper)",
                        "info": {"song_name": "Foo", "song_author_name": "X"},
                    },
                    {
                        "hash": "abc123",
                        "path": "CustomLevels/1a2b (Foo - Mapper) copy",
                        "info": {"song_name": "Foo", "song_author_name": "X"},
                    },
                ]
            }
        }


class MapSelection(BaseModel):
    """Position of one map inside the analysed groups."""

    group_index: int = Field(..., ge=0)
    map_index: int = Field(..., ge=0)


class DeletionPlanRequest(BaseModel):
    """Request to turn a selection over analysed groups into a deletion list."""

    groups: list[SimilarMapGroup] = Field(
        default_factory=list, description="Groups as returned by /analyze"
    )
    selected_groups: list[Annotated[int, Field(ge=0)]] = Field(
        default_factory=list,
        description="Groups whose non-recommended maps should be deleted",
    )
    selected_maps: list[MapSelection] = Field(
        default_factory=list,
        description="Individually selected maps, overriding group selection",
    )
