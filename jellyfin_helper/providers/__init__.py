from __future__ import annotations

from .jellyfin import JellyfinClient, JellyfinError

__all__ = ["JellyfinClient", "JellyfinError"]
