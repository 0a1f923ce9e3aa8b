from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import Settings
from ..core.identity.featuring import normalize_markers
from ..providers.jellyfin import JellyfinClient, JellyfinError


@dataclass(slots=True)
class DoctorReport:
    ok: bool = True
    checks: list[str] = field(default_factory=list)

    def add(self, label: str, status: str, detail: Optional[str] = None) -> None:
        line = f"{label}: {status}"
        if detail:
            line = f"{line} ({detail})"
        self.checks.append(line)
        if status == "ERROR":
            self.ok = False


def run(
    settings: Settings,
    *,
    validate_online: bool = False,
    client: Optional[JellyfinClient] = None,
) -> DoctorReport:
    report = DoctorReport()

    base_url = settings.jellyfin.base_url
    url_ok = base_url.startswith(("http://", "https://"))
    if url_ok:
        report.add("Jellyfin URL", "OK", base_url)
    else:
        report.add("Jellyfin URL", "ERROR", f"not an http(s) URL: {base_url!r}")

    if settings.jellyfin.api_token and settings.jellyfin.api_token.strip():
        report.add("API token", "OK", "configured")
    else:
        report.add(
            "API token",
            "WARNING",
            "set jellyfin.api_token; most servers reject anonymous calls",
        )

    report.add(
        "Similar artists",
        "OK",
        f"min_common_length={settings.similar_artist.min_common_length}",
    )

    markers = normalize_markers(settings.featuring_artists.markers)
    if markers:
        report.add("Featuring markers", "OK", ", ".join(markers))
    else:
        report.add("Featuring markers", "WARNING", "none configured")

    if not validate_online:
        report.add("Jellyfin server", "SKIPPED", "pass --online to contact the server")
    elif not url_ok:
        report.add("Jellyfin server", "SKIPPED", "fix the URL first")
    else:
        client = client or JellyfinClient(settings.jellyfin)
        try:
            info = client.ping()
        except JellyfinError as exc:
            report.add("Jellyfin server", "ERROR", str(exc))
        else:
            name = info.get("ServerName") or "unknown"
            version = info.get("Version") or "?"
            report.add("Jellyfin server", "OK", f"{name} {version}")

    return report
