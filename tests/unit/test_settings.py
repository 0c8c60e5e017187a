"""Tests for application settings."""

import pydantic
import pytest

from similar_maps.config.settings import Settings


class TestThresholdOrder:
    """Tests for the similarity threshold ordering check."""

    def test_defaults_are_ordered(self):
        """Test the default tiers are accepted."""
        settings = Settings()

        assert (
            settings.similarity_high_threshold
            > settings.similarity_medium_threshold
            > settings.similarity_low_threshold
        )

    def test_custom_order_accepted(self):
        """Test a strictly decreasing custom ordering."""
        settings = Settings(
            similarity_high_threshold=0.95,
            similarity_medium_threshold=0.85,
            similarity_low_threshold=0.6,
        )

        assert settings.similarity_low_threshold == 0.6

    @pytest.mark.parametrize(
        "high,medium,low",
        [
            (0.8, 0.8, 0.7),
            (0.9, 0.7, 0.7),
            (0.7, 0.8, 0.9),
        ],
    )
    def test_unordered_thresholds_rejected(self, high, medium, low):
        """Test equal or inverted tiers fail validation."""
        with pytest.raises(pydantic.ValidationError):
            Settings(
                similarity_high_threshold=high,
                similarity_medium_threshold=medium,
                similarity_low_threshold=low,
            )


class TestScoreWeights:
    """Tests for Settings.score_weights."""

    def test_weights_follow_fields(self):
        """Test weights reflect the configured values."""
        settings = Settings(score_ranked_bonus=250.0)

        assert settings.score_weights["ranked_bonus"] == 250.0
        assert settings.score_weights["vote"] == settings.score_vote_weight
