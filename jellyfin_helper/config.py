from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.identity.matching import DEFAULT_MIN_COMMON_LENGTH

logger = logging.getLogger(__name__)


class JellyfinSettings(BaseModel):
    base_url: str
    api_token: Optional[str] = None
    timeout_seconds: float = 10.0

    @field_validator("base_url", mode="before")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return str(value).strip().rstrip("/")


class SimilarArtistSettings(BaseModel):
    min_common_length: int = DEFAULT_MIN_COMMON_LENGTH

    @field_validator("min_common_length", mode="after")
    @classmethod
    def _default_length(cls, value: int) -> int:
        if value <= 0:
            logger.warning(
                "similar_artist.min_common_length=%s is not positive, using %s",
                value,
                DEFAULT_MIN_COMMON_LENGTH,
            )
            return DEFAULT_MIN_COMMON_LENGTH
        return value


class FeaturingArtistSettings(BaseModel):
    markers: List[str] = Field(
        default_factory=lambda: ["feat.", "featuring", "ft.", "'vec"]
    )


class Settings(BaseModel):
    jellyfin: JellyfinSettings
    similar_artist: SimilarArtistSettings = SimilarArtistSettings()
    featuring_artists: FeaturingArtistSettings = FeaturingArtistSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "config.yaml", cwd / "config.yml"):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find config.yaml - pass --config explicitly.")
