"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "pretty", "console"] = Field(default="json")

    # Analysis Limits
    max_batch_size: int = Field(default=10000, ge=1, description="Maximum maps per analysis")
    analysis_timeout_seconds: float = Field(default=60.0, gt=0.0, le=3600.0)

    # Similarity Tiers (exclusive lower bounds)
    similarity_high_threshold: float = Field(default=0.9, ge=0.0, le=1.0)
    similarity_medium_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    similarity_low_threshold: float = Field(default=0.7, ge=0.0, le=1.0)

    # Corroborating Signals
    bpm_tolerance: float = Field(default=10.0, ge=0.0)
    bpm_tolerance_ratio: float = Field(default=0.1, ge=0.0)
    duration_tolerance_seconds: float = Field(default=15.0, ge=0.0)
    duration_tolerance_ratio: float = Field(default=0.15, ge=0.0)

    # Ranking Weights
    score_vote_weight: float = Field(default=2.0, ge=0.0)
    score_downloads_divisor: float = Field(default=20.0, gt=0.0)
    score_ranked_bonus: float = Field(default=500.0, ge=0.0)
    score_curated_bonus: float = Field(default=100.0, ge=0.0)
    score_verified_uploader_bonus: float = Field(default=50.0, ge=0.0)
    score_automapper_penalty: float = Field(default=300.0, ge=0.0)
    score_full_spread_bonus: float = Field(default=100.0, ge=0.0)
    full_spread_min_difficulties: int = Field(default=5, ge=1)

    # Size Estimate (KB)
    size_base_kb: int = Field(default=200, ge=0)
    size_per_difficulty_kb: int = Field(default=50, ge=0)

    @model_validator(mode="after")
    def check_threshold_order(self) -> "Settings":
        """Similarity tiers must be strictly decreasing."""
        if not (
            self.similarity_high_threshold
            > self.similarity_medium_threshold
            > self.similarity_low_threshold
        ):
            raise ValueError("similarity thresholds must satisfy high > medium > low")
        return self

    @property
    def score_weights(self) -> dict[str, float]:
        """Ranking weights in the shape MapScorer expects."""
        return {
            "vote": self.score_vote_weight,
            "downloads_divisor": self.score_downloads_divisor,
            "ranked_bonus": self.score_ranked_bonus,
            "curated_bonus": self.score_curated_bonus,
            "verified_uploader_bonus": self.score_verified_uploader_bonus,
            "automapper_penalty": self.score_automapper_penalty,
            "full_spread_bonus": self.score_full_spread_bonus,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
