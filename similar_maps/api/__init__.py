"""HTTP API for the analysis service."""
