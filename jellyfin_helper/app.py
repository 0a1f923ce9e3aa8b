from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import Settings
from .providers.jellyfin import JellyfinClient
from .services.featuring_artists import FeaturingArtistsFinder
from .services.similar_artists import SimilarArtistFinder


@dataclass
class JellyfinHelperApp:
    settings: Settings
    _jellyfin: JellyfinClient | None = None

    @classmethod
    def create(cls, settings: Settings) -> "JellyfinHelperApp":
        return cls(settings=settings)

    @property
    def jellyfin(self) -> JellyfinClient:
        if self._jellyfin is None:
            self._jellyfin = JellyfinClient(self.settings.jellyfin)
        return self._jellyfin

    def get_similar_artist_finder(
        self, *, min_common_length: Optional[int] = None
    ) -> SimilarArtistFinder:
        return SimilarArtistFinder(
            self.jellyfin,
            self.settings.similar_artist,
            min_common_length=min_common_length,
        )

    def get_featuring_artists_finder(self) -> FeaturingArtistsFinder:
        return FeaturingArtistsFinder(self.jellyfin, self.settings.featuring_artists)
