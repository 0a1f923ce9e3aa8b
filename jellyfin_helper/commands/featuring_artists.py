from __future__ import annotations

from ..services.featuring_artists import FeaturingArtistsFinder


def run(finder: FeaturingArtistsFinder) -> int:
    found = finder.find()
    for artist in found:
        print(artist.render())
    return len(found)
