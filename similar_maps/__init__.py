"""Duplicate and near-duplicate detection for custom map collections."""

__version__ = "1.0.0"
