"""
Similar artist name matching.

This module flags pairs of artist names that probably refer to the same
artist but were spelled differently in the library:
- Normalization (lowercase, strip diacritics, keep only a-z and 0-9)
- Shingling (all substrings of a fixed length)
- Pairwise matching (names match when their shingle sets intersect)
- Canonical pair ordering, deduplication and sorting

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable, Sequence
from typing import Optional

from .models import ArtistRecord, NormalizedArtist, SimilarPair


DEFAULT_MIN_COMMON_LENGTH = 5

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_name(value: Optional[str]) -> str:
    """
    Normalize an artist name for shingling.

    Process:
    1. Lowercase
    2. Unicode decomposition (NFD)
    3. Drop combining marks (accents, diaeresis, cedilla...)
    4. Drop everything that is not an ASCII letter or digit

    Examples:
        "Beyoncé Knowles" → "beyonceknowles"
        "Gang Starr" → "gangstarr"
        "AC/DC" → "acdc"

    Args:
        value: The raw artist name (may be None)

    Returns:
        Normalized name, possibly empty
    """
    if not value:
        return ""

    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))
    return _NON_ALNUM.sub("", stripped)


def shingles(normalized: str, length: int) -> frozenset[str]:
    """
    Split a normalized name into every substring of exactly ``length`` characters.

    Examples:
        shingles("gangstarr", 5) → {"gangs", "angst", "ngsta", "gstar", "starr"}
        shingles("abba", 5) → {}

    Args:
        normalized: Output of normalize_name
        length: Shingle length (the minimum common length)

    Returns:
        Set of shingles, empty when the name is shorter than ``length``
    """
    if length <= 0 or len(normalized) < length:
        return frozenset()
    return frozenset(normalized[i:i + length] for i in range(len(normalized) - length + 1))


def shares_shingle(left: frozenset[str], right: frozenset[str]) -> bool:
    """Return True when the two shingle sets have at least one element in common."""
    smaller, larger = (left, right) if len(left) <= len(right) else (right, left)
    for shingle in smaller:
        if shingle in larger:
            return True
    return False


def compare_key(value: str) -> str:
    """Case-insensitive comparison key shared by pair ordering and equality."""
    return value.lower()


def canonical_pair(left: str, right: str) -> Optional[SimilarPair]:
    """
    Build the canonical pair for two original names.

    Returns None when both names are the same case-insensitively: that is the
    same artist stored twice, not two similar artists.
    """
    left_key = compare_key(left)
    right_key = compare_key(right)
    if left_key == right_key:
        return None
    if left_key > right_key:
        left, right = right, left
    return SimilarPair(first=left, second=right)


def sort_pairs(pairs: Iterable[SimilarPair]) -> list[SimilarPair]:
    """
    Order pairs by first name, then second name, ignoring case.

    The exact strings break remaining ties so the order only depends on the
    set of pairs, never on the order they were found in.
    """
    return sorted(
        pairs,
        key=lambda pair: (compare_key(pair.first), compare_key(pair.second), pair.first, pair.second),
    )


def effective_min_common_length(value: Optional[int]) -> int:
    """Fall back to the default when the configured length is missing or not positive."""
    if value is None or value <= 0:
        return DEFAULT_MIN_COMMON_LENGTH
    return value


class SimilarNameMatcher:
    """
    Finds artist names sharing at least ``min_common_length`` consecutive characters.

    Usage:
        matcher = SimilarNameMatcher(min_common_length=5)
        for pair in matcher.match(records):
            print(pair.render())
    """

    def __init__(self, min_common_length: Optional[int] = DEFAULT_MIN_COMMON_LENGTH) -> None:
        self.min_common_length = effective_min_common_length(min_common_length)

    def normalize(self, record: ArtistRecord) -> NormalizedArtist:
        normalized = normalize_name(record.name)
        return NormalizedArtist(
            original_name=record.name,
            shingle_set=shingles(normalized, self.min_common_length),
        )

    def match(self, records: Sequence[ArtistRecord]) -> list[SimilarPair]:
        """
        Compare every pair of records and return the similar ones.

        Args:
            records: Artists in library order

        Returns:
            Unique canonical pairs, sorted case-insensitively
        """
        # Names too short to produce a shingle can never match; drop them up front.
        candidates = [
            artist
            for artist in (self.normalize(record) for record in records)
            if artist.shingle_set
        ]

        seen: set[tuple[str, str]] = set()
        pairs: list[SimilarPair] = []
        for i, left in enumerate(candidates):
            for right in candidates[i + 1:]:
                if not shares_shingle(left.shingle_set, right.shingle_set):
                    continue
                pair = canonical_pair(left.original_name, right.original_name)
                if pair is None:
                    continue
                key = (pair.first, pair.second)
                if key in seen:
                    continue
                seen.add(key)
                pairs.append(pair)

        return sort_pairs(pairs)


def find_similar_names(
    records: Sequence[ArtistRecord],
    min_common_length: Optional[int] = DEFAULT_MIN_COMMON_LENGTH,
) -> list[SimilarPair]:
    """Convenience wrapper around SimilarNameMatcher.match."""
    return SimilarNameMatcher(min_common_length).match(records)
