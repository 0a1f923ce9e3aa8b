from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ..config import FeaturingArtistSettings
from ..core.identity.featuring import contains_featuring_marker, normalize_markers
from ..core.identity.matching import compare_key
from ..core.identity.models import ArtistRecord

logger = logging.getLogger(__name__)


class ArtistAlbumProvider(Protocol):
    def fetch_artists(self) -> List[ArtistRecord]:
        ...

    def fetch_albums_for_artist(self, artist_id: str) -> List[str]:
        ...


@dataclass(frozen=True, slots=True)
class FeaturingArtist:
    name: str
    albums: List[str] = field(default_factory=list)

    def render(self) -> str:
        album_list = ", ".join(self.albums) if self.albums else "<no albums>"
        return f"{self.name} -> {album_list}"


class FeaturingArtistsFinder:
    """Service listing artists whose names contain a featuring marker, with their albums."""

    def __init__(
        self,
        provider: ArtistAlbumProvider,
        settings: Optional[FeaturingArtistSettings] = None,
    ) -> None:
        self.provider = provider
        settings = settings or FeaturingArtistSettings()
        self.markers = normalize_markers(settings.markers)

    def find(self) -> List[FeaturingArtist]:
        if not self.markers:
            logger.warning("No featuring markers configured; nothing to look for")
            return []
        artists = [
            artist
            for artist in self.provider.fetch_artists()
            if contains_featuring_marker(artist.name, self.markers)
        ]
        artists.sort(key=lambda artist: compare_key(artist.name))
        logger.info("Found %d artist(s) with featuring markers", len(artists))
        return [
            FeaturingArtist(
                name=artist.name,
                albums=self.provider.fetch_albums_for_artist(artist.id),
            )
            for artist in artists
        ]
