"""
Artist identity domain logic.

This module handles:
- Artist name normalization and shingling
- Similar name detection (names sharing a run of characters)
- Canonical pair ordering and deduplication
- Featuring/collaboration marker detection

All logic is pure business logic with no I/O dependencies.
"""

from __future__ import annotations

from .featuring import contains_featuring_marker, normalize_markers
from .matching import (
    DEFAULT_MIN_COMMON_LENGTH,
    SimilarNameMatcher,
    canonical_pair,
    find_similar_names,
    normalize_name,
    shingles,
    sort_pairs,
)
from .models import ArtistRecord, NormalizedArtist, SimilarPair

__all__ = [
    "ArtistRecord",
    "DEFAULT_MIN_COMMON_LENGTH",
    "NormalizedArtist",
    "SimilarNameMatcher",
    "SimilarPair",
    "canonical_pair",
    "contains_featuring_marker",
    "find_similar_names",
    "normalize_markers",
    "normalize_name",
    "shingles",
    "sort_pairs",
]
