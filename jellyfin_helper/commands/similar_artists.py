from __future__ import annotations

from ..services.similar_artists import SimilarArtistFinder


def run(finder: SimilarArtistFinder) -> int:
    pairs = finder.list_similar_artists()
    for pair in pairs:
        print(pair.render())
    return len(pairs)
