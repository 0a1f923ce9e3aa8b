from __future__ import annotations

from .featuring_artists import FeaturingArtist, FeaturingArtistsFinder
from .similar_artists import ArtistProvider, SimilarArtistFinder

__all__ = [
    "ArtistProvider",
    "FeaturingArtist",
    "FeaturingArtistsFinder",
    "SimilarArtistFinder",
]
