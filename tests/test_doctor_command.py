import unittest

from jellyfin_helper.commands.doctor import DoctorReport, run
from jellyfin_helper.config import (
    FeaturingArtistSettings,
    JellyfinSettings,
    Settings,
    SimilarArtistSettings,
)
from jellyfin_helper.providers.jellyfin import JellyfinError


class _PingStub:
    def __init__(self, info=None, error=None) -> None:
        self.info = info
        self.error = error
        self.calls = 0

    def ping(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.info


def _settings(**jellyfin) -> Settings:
    jellyfin.setdefault("base_url", "http://jellyfin:8096")
    return Settings(
        jellyfin=JellyfinSettings(**jellyfin),
        similar_artist=SimilarArtistSettings(min_common_length=6),
    )


class TestDoctorReport(unittest.TestCase):
    def test_formats_lines_and_tracks_errors(self) -> None:
        report = DoctorReport()
        report.add("API token", "WARNING", "missing")
        report.add("Similar artists", "OK")
        self.assertTrue(report.ok)
        report.add("Jellyfin URL", "ERROR", "not an http(s) URL: ''")
        self.assertFalse(report.ok)
        self.assertEqual(
            report.checks,
            [
                "API token: WARNING (missing)",
                "Similar artists: OK",
                "Jellyfin URL: ERROR (not an http(s) URL: '')",
            ],
        )


class TestDoctorCommand(unittest.TestCase):
    def test_offline_checks(self) -> None:
        report = run(_settings(api_token="x"))
        joined = "\n".join(report.checks)
        self.assertTrue(report.ok)
        self.assertIn("Jellyfin URL: OK (http://jellyfin:8096)", joined)
        self.assertIn("API token: OK", joined)
        self.assertIn("Similar artists: OK (min_common_length=6)", joined)
        self.assertIn("Jellyfin server: SKIPPED", joined)

    def test_warns_without_token_and_markers(self) -> None:
        settings = _settings()
        settings.featuring_artists = FeaturingArtistSettings(markers=[])
        report = run(settings)
        joined = "\n".join(report.checks)
        self.assertTrue(report.ok)
        self.assertIn("API token: WARNING", joined)
        self.assertIn("Featuring markers: WARNING", joined)

    def test_rejects_non_http_url(self) -> None:
        stub = _PingStub(info={})
        report = run(_settings(base_url="jellyfin:8096"), validate_online=True, client=stub)
        self.assertFalse(report.ok)
        self.assertIn("Jellyfin URL: ERROR", "\n".join(report.checks))
        self.assertEqual(stub.calls, 0)

    def test_online_success(self) -> None:
        stub = _PingStub(info={"ServerName": "home", "Version": "10.9.0"})
        report = run(_settings(api_token="x"), validate_online=True, client=stub)
        self.assertTrue(report.ok)
        self.assertIn("Jellyfin server: OK (home 10.9.0)", "\n".join(report.checks))

    def test_online_failure(self) -> None:
        stub = _PingStub(error=JellyfinError("unable to reach Jellyfin"))
        report = run(_settings(api_token="x"), validate_online=True, client=stub)
        self.assertFalse(report.ok)
        self.assertIn("Jellyfin server: ERROR (unable to reach Jellyfin)", "\n".join(report.checks))


if __name__ == "__main__":
    unittest.main()
