"""Grouping, similarity, and ranking module."""

from similar_maps.ranking.grouping import HashGrouper, SongGrouper
from similar_maps.ranking.normalization import TextNormalizer
from similar_maps.ranking.scorer import MapScorer
from similar_maps.ranking.similarity import SimilarityMatcher, levenshtein_distance

__all__ = [
    "HashGrouper",
    "SongGrouper",
    "TextNormalizer",
    "SimilarityMatcher",
    "MapScorer",
    "levenshtein_distance",
]
