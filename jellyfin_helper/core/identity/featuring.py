"""
Detection of artist entries that are really collaborations.

Library servers often create a separate artist for "X feat. Y" style credits.
These helpers spot such names using a configurable list of markers.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional


def normalize_markers(markers: Iterable[Optional[str]]) -> list[str]:
    """Lowercase markers and drop empty ones, keeping their order."""
    cleaned: list[str] = []
    for marker in markers:
        value = (marker or "").lower()
        if value.strip():
            cleaned.append(value)
    return cleaned


def contains_featuring_marker(name: Optional[str], markers: Iterable[str]) -> bool:
    """
    Check whether an artist name contains one of the (already normalized) markers.

    Examples:
        contains_featuring_marker("Daft Punk feat. Pharrell", ["feat."]) → True
        contains_featuring_marker("Featherweight", ["feat."]) → False
    """
    if name is None:
        return False
    lowered = name.lower()
    return any(marker in lowered for marker in markers)
