"""Tests for map scoring and ranking."""

import math

import pytest

from similar_maps.models.analysis import ScoredMap, SimilarityLevel, SimilarMapGroup
from similar_maps.models.map import DifficultyTag, LocalMap, MapInfo, SongDetails, Uploader
from similar_maps.ranking.scorer import MapScorer


def create_map(
    path: str = "CustomLevels/1",
    difficulty_count: int = 3,
    details: SongDetails | None = None,
) -> LocalMap:
    """Create a test map with the given number of difficulties."""
    tags = list(DifficultyTag)
    difficulties = [tags[i % len(tags)] for i in range(difficulty_count)]
    return LocalMap(
        hash=path,
        path=path,
        info=MapInfo(song_name="Song", song_author_name="Artist", difficulties=difficulties),
        song_details=details,
    )


def create_group(*maps: LocalMap) -> SimilarMapGroup:
    """Create an unranked group."""
    return SimilarMapGroup(
        song_name="Song",
        author_name="Artist",
        maps=[ScoredMap(map=m) for m in maps],
        similarity=SimilarityLevel.HIGH,
    )


class TestScoreMap:
    """Tests for MapScorer.score_map."""

    @pytest.fixture
    def scorer(self):
        """Create scorer with default weights."""
        return MapScorer()

    def test_no_metadata(self, scorer):
        """Test a map without details scores zero."""
        assert scorer.score_map(create_map()) == 0

    def test_votes_and_downloads(self, scorer):
        """Test community metrics contribute (up - down) * 2 + downloads / 20."""
        details = SongDetails(up_votes=10, down_votes=2, downloads=200)

        assert scorer.score_map(create_map(details=details)) == 26

    def test_missing_metrics_count_as_zero(self, scorer):
        """Test missing numeric fields default to zero."""
        details = SongDetails(up_votes=5)

        assert scorer.score_map(create_map(details=details)) == 10

    @pytest.mark.parametrize(
        "details,expected",
        [
            (SongDetails(ranked=True), 500),
            (SongDetails(bl_ranked=True), 500),
            (SongDetails(ranked=True, bl_ranked=True), 500),
            (SongDetails(curated=True), 100),
            (SongDetails(uploader=Uploader(name="Mapper", verified=True)), 50),
            (SongDetails(uploader=Uploader(name="Mapper")), 0),
            (SongDetails(automapper=True), -300),
            (
                SongDetails(
                    ranked=True,
                    curated=True,
                    automapper=True,
                    uploader=Uploader(verified=True),
                ),
                350,
            ),
        ],
    )
    def test_quality_flags(self, scorer, details, expected):
        """Test bonuses and penalties are additive."""
        assert scorer.score_map(create_map(details=details)) == expected

    def test_full_difficulty_spread(self, scorer):
        """Test five or more difficulties earn the spread bonus."""
        assert scorer.score_map(create_map(difficulty_count=4)) == 0
        assert scorer.score_map(create_map(difficulty_count=5)) == 100
        assert scorer.score_map(create_map(difficulty_count=7)) == 100

    def test_spread_bonus_without_metadata(self, scorer):
        """Test the spread bonus does not depend on details."""
        assert scorer.score_map(create_map(difficulty_count=5, details=None)) == 100

    @pytest.mark.parametrize(
        "details",
        [
            SongDetails(up_votes=math.nan),
            SongDetails(downloads=math.inf),
            SongDetails(up_votes=math.inf, down_votes=math.inf),
        ],
    )
    def test_non_finite_score_clamped(self, scorer, details):
        """Test NaN and infinite scores become zero."""
        assert scorer.score_map(create_map(difficulty_count=5, details=details)) == 0

    def test_custom_weights(self):
        """Test weights can be overridden individually."""
        scorer = MapScorer(weights={"ranked_bonus": 1000})

        assert scorer.score_map(create_map(details=SongDetails(ranked=True, curated=True))) == 1100


class TestEstimateMapSize:
    """Tests for MapScorer.estimate_map_size."""

    @pytest.mark.parametrize("difficulty_count,expected", [(0, 200), (1, 250), (3, 350), (5, 450)])
    def test_size_from_difficulty_count(self, difficulty_count, expected):
        """Test size is 200 KB plus 50 KB per difficulty."""
        assert MapScorer().estimate_map_size(create_map(difficulty_count=difficulty_count)) == expected


class TestRankGroups:
    """Tests for MapScorer.rank_groups."""

    @pytest.fixture
    def scorer(self):
        return MapScorer()

    def test_empty(self, scorer):
        """Test ranking no groups."""
        assert scorer.rank_groups([]) == []

    def test_best_map_first_and_recommended(self, scorer):
        """Test members are sorted by score and only the best is recommended."""
        group = create_group(
            create_map("low", details=SongDetails(automapper=True)),
            create_map("high", details=SongDetails(ranked=True)),
            create_map("mid", details=SongDetails(curated=True)),
        )

        scorer.rank_groups([group])

        assert [item.map.path for item in group.maps] == ["high", "mid", "low"]
        assert [item.score for item in group.maps] == [500, 100, -300]
        assert [item.recommended for item in group.maps] == [True, False, False]

    def test_ties_keep_input_order(self, scorer):
        """Test the earliest map wins a tie."""
        group = create_group(
            create_map("first"),
            create_map("second"),
            create_map("third", details=SongDetails(automapper=True)),
        )

        scorer.rank_groups([group])

        assert [item.map.path for item in group.maps] == ["first", "second", "third"]
        assert group.maps[0].recommended is True
        assert sum(item.recommended for item in group.maps) == 1

    def test_total_size(self, scorer):
        """Test group size sums member estimates."""
        group = create_group(
            create_map("a", difficulty_count=1),
            create_map("b", difficulty_count=5),
        )

        scorer.rank_groups([group])

        assert group.total_size == 250 + 450

    def test_rerank_is_idempotent(self, scorer):
        """Test ranking twice gives the same result."""
        group = create_group(
            create_map("a"),
            create_map("b", details=SongDetails(curated=True)),
        )

        scorer.rank_groups([group])
        scorer.rank_groups([group])

        assert [item.map.path for item in group.maps] == ["b", "a"]
        assert [item.recommended for item in group.maps] == [True, False]
