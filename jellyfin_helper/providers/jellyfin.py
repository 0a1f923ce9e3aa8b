from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, List, Optional

from ..config import JellyfinSettings
from ..core.identity.matching import compare_key
from ..core.identity.models import ArtistRecord

logger = logging.getLogger(__name__)

ARTISTS_PATH = "/Artists?SortBy=SortName&SortOrder=Ascending&Limit=10000&Recursive=true"
ALBUMS_PATH = "/Items?IncludeItemTypes=MusicAlbum&Recursive=true&Limit=2000&ArtistIds={artist_id}"
SYSTEM_INFO_PATH = "/System/Info/Public"
TOKEN_HEADER = "X-Emby-Token"


class JellyfinError(RuntimeError):
    pass


class JellyfinClient:
    def __init__(self, settings: JellyfinSettings) -> None:
        if not settings.base_url:
            raise ValueError("Property jellyfin.base_url must be configured.")
        self.base_url = settings.base_url
        self.token = settings.api_token
        self.timeout = settings.timeout_seconds

    def fetch_artists(self) -> List[ArtistRecord]:
        payload = self._request_json(ARTISTS_PATH, label="Artist lookup")
        artists: List[ArtistRecord] = []
        for item in _items(payload):
            name = _text_or_none(item.get("Name"))
            artist_id = _text_or_none(item.get("Id"))
            if name and name.strip() and artist_id and artist_id.strip():
                artists.append(ArtistRecord(id=artist_id, name=name))
        logger.debug("Fetched %d artists from %s", len(artists), self.base_url)
        return artists

    def fetch_albums_for_artist(self, artist_id: str) -> List[str]:
        path = ALBUMS_PATH.format(artist_id=urllib.parse.quote(artist_id, safe=""))
        payload = self._request_json(path, label=f"Album lookup for artist {artist_id}")
        albums: dict[str, None] = {}
        for item in _items(payload):
            album = _text_or_none(item.get("Name"))
            if album and album.strip():
                albums.setdefault(album, None)
        return sorted(albums, key=compare_key)

    def ping(self) -> dict:
        req = self._build_request(SYSTEM_INFO_PATH)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return json.load(resp)
        except urllib.error.HTTPError as exc:
            raise JellyfinError(f"Jellyfin HTTP error {exc.code}") from exc
        except urllib.error.URLError as exc:
            raise JellyfinError(f"unable to reach Jellyfin at {self.base_url}: {exc}") from exc
        except ValueError as exc:
            raise JellyfinError(f"unexpected response from {self.base_url}") from exc

    def build_url(self, path_or_url: str) -> str:
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        if not path_or_url.startswith("/"):
            path_or_url = f"/{path_or_url}"
        return f"{self.base_url}{path_or_url}"

    def _build_request(self, path_or_url: str) -> urllib.request.Request:
        headers = {"Accept": "application/json"}
        if self.token and self.token.strip():
            headers[TOKEN_HEADER] = self.token
        return urllib.request.Request(self.build_url(path_or_url), headers=headers, method="GET")

    def _request_json(self, path: str, *, label: str) -> Optional[Any]:
        req = self._build_request(path)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                if resp.status != 200:
                    logger.warning("%s failed (HTTP %s)", label, resp.status)
                    return None
                return json.load(resp)
        except urllib.error.HTTPError as exc:
            logger.warning("%s failed (HTTP %s)", label, exc.code)
        except urllib.error.URLError as exc:
            logger.warning("%s error: %s", label, exc.reason)
        except ValueError as exc:
            logger.warning("%s returned invalid JSON: %s", label, exc)
        return None


def _items(payload: Optional[Any]) -> List[dict]:
    if not isinstance(payload, dict):
        return []
    items = payload.get("Items")
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
