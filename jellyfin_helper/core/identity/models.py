"""
Domain models for artist name matching.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ArtistRecord:
    """
    An artist entry as returned by the library server.

    Example:
        ArtistRecord(id="a1b2", name="Beyoncé Knowles")
    """
    id: str
    """Opaque server identifier, passed through untouched"""

    name: str
    """Display name exactly as stored in the library"""


@dataclass(frozen=True, slots=True)
class NormalizedArtist:
    """
    Comparison form of an artist, built once per record before matching.

    An empty shingle set means the name is too short (or has no
    alphanumeric characters) to ever match anything.
    """
    original_name: str
    shingle_set: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class SimilarPair:
    """
    Two distinct artist names that share enough characters to be reviewed.

    ``first`` always sorts before ``second`` case-insensitively and the two
    never compare equal case-insensitively.
    """
    first: str
    second: str

    def render(self) -> str:
        return f"{self.first} <> {self.second}"
