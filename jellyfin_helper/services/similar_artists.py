from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from ..config import SimilarArtistSettings
from ..core.identity.matching import SimilarNameMatcher
from ..core.identity.models import ArtistRecord, SimilarPair

logger = logging.getLogger(__name__)


class ArtistProvider(Protocol):
    """Protocol for anything that can list the artists of a library."""

    def fetch_artists(self) -> List[ArtistRecord]:
        ...


class SimilarArtistFinder:
    """Service listing library artists whose names look like duplicates."""

    def __init__(
        self,
        provider: ArtistProvider,
        settings: Optional[SimilarArtistSettings] = None,
        min_common_length: Optional[int] = None,
    ) -> None:
        self.provider = provider
        configured = settings.min_common_length if settings else None
        if min_common_length is not None:
            configured = min_common_length
        self.matcher = SimilarNameMatcher(configured)

    def list_similar_artists(self) -> List[SimilarPair]:
        artists = self.provider.fetch_artists()
        pairs = self.find_similar_artists(artists)
        logger.info(
            "Compared %d artists (min common length %d): %d similar pair(s)",
            len(artists),
            self.matcher.min_common_length,
            len(pairs),
        )
        return pairs

    def find_similar_artists(self, artists: List[ArtistRecord]) -> List[SimilarPair]:
        return self.matcher.match(artists)
