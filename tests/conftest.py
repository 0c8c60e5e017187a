"""Pytest fixtures for testing."""

import pytest

from similar_maps.config.settings import Settings
from similar_maps.models.map import DifficultyTag, LocalMap, MapInfo, SongDetails
from similar_maps.pipelines.analyze import AnalysisPipeline

ALL_DIFFICULTIES = list(DifficultyTag)


@pytest.fixture
def test_settings():
    """Create settings for testing."""
    return Settings(
        debug=True,
        log_level="DEBUG",
        max_batch_size=100,
        analysis_timeout_seconds=10.0,
    )


@pytest.fixture
def pipeline(test_settings):
    """Create pipeline tuned by test settings."""
    return AnalysisPipeline.from_settings(test_settings)


@pytest.fixture
def sample_maps():
    """Two exact copies of "Foo" and a ranked remix of it."""
    return [
        LocalMap(
            hash="1",
            path="CustomLevels/a (Foo - Mapper)",
            info=MapInfo(song_name="Foo", song_author_name="X", difficulties=ALL_DIFFICULTIES[:3]),
        ),
        LocalMap(
            hash="1",
            path="CustomLevels/b (Foo - Mapper)",
            info=MapInfo(song_name="Foo", song_author_name="X", difficulties=ALL_DIFFICULTIES[:3]),
        ),
        LocalMap(
            hash="2",
            path="CustomLevels/c (Foo Remix - Other)",
            info=MapInfo(song_name="Foo (Remix)", song_author_name="X", difficulties=ALL_DIFFICULTIES),
            song_details=SongDetails(ranked=True),
        ),
    ]
