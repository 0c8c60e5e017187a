"""Local map models."""

from enum import Enum

from pydantic import BaseModel, Field


class DifficultyTag(str, Enum):
    """Difficulty of a single beatmap inside a map."""

    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    EXPERT = "Expert"
    EXPERT_PLUS = "ExpertPlus"


class Uploader(BaseModel):
    """Uploader of a map on the community site."""

    name: str | None = Field(default=None, description="Uploader display name")
    verified: bool = Field(default=False, description="Whether the uploader is a verified mapper")


class SongDetails(BaseModel):
    """Community metadata for a map.

    Every numeric field is optional. A missing value carries no signal for
    comparisons and counts as zero for scoring.
    """

    duration: float | None = Field(default=None, description="Song duration in seconds")
    up_votes: float | None = Field(default=None, description="Up-vote count")
    down_votes: float | None = Field(default=None, description="Down-vote count")
    downloads: float | None = Field(default=None, description="Download count")

    ranked: bool = Field(default=False, description="Ranked on ScoreSaber")
    bl_ranked: bool = Field(default=False, description="Ranked on BeatLeader")
    curated: bool = Field(default=False, description="Curated map")
    automapper: bool = Field(default=False, description="Generated by an automapper")

    uploader: Uploader | None = Field(default=None, description="Uploader info")


class MapInfo(BaseModel):
    """Song information read from the map's info file."""

    song_name: str | None = Field(default=None, description="Song title")
    song_sub_name: str | None = Field(default=None, description="Song subtitle")
    song_author_name: str | None = Field(default=None, description="Song artist")
    level_author_name: str | None = Field(default=None, description="Mapper name")
    beats_per_minute: float | None = Field(default=None, description="Song tempo")
    difficulties: list[DifficultyTag] = Field(
        default_factory=list, description="Difficulty entries, one per beatmap"
    )


class LocalMap(BaseModel):
    """A custom map installed in the user's game folder."""

    hash: str = Field(..., min_length=1, description="Content hash of the map files")
    path: str = Field(..., min_length=1, description="Location of the map on disk")
    info: MapInfo = Field(default_factory=MapInfo, description="Song information")
    song_details: SongDetails | None = Field(
        default=None, description="Community metadata, if it was fetched"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "hash": "a1b2c3d4e5f6",
                "path": "CustomLevels/1a2b (Song Name - Mapper)",
                "info": {
                    "song_name": "Song Name",
                    "song_author_name": "Artist",
                    "level_author_name": "Mapper",
                    "beats_per_minute": 128.0,
                    "difficulties": ["Hard", "Expert", "ExpertPlus"],
                },
                "song_details": {
                    "duration": 215.0,
                    "up_votes": 1200,
                    "down_votes": 40,
                    "downloads": 30000,
                    "ranked": True,
                    "uploader": {"name": "Mapper", "verified": True},
                },
            }
        }
