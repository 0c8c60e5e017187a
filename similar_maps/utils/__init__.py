"""Utility modules."""

from similar_maps.utils.exceptions import (
    AnalysisCancelledError,
    APIError,
    MapAnalysisError,
    ValidationError,
)
from similar_maps.utils.formatting import format_file_size, format_kilobytes
from similar_maps.utils.logging import get_logger, setup_logging

__all__ = [
    "MapAnalysisError",
    "ValidationError",
    "APIError",
    "AnalysisCancelledError",
    "format_file_size",
    "format_kilobytes",
    "get_logger",
    "setup_logging",
]
