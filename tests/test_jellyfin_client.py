import io
import json
import unittest
import urllib.error
from unittest.mock import patch

from jellyfin_helper.config import JellyfinSettings
from jellyfin_helper.core.identity.models import ArtistRecord
from jellyfin_helper.providers.jellyfin import JellyfinClient, JellyfinError


class _FakeResponse(io.BytesIO):
    def __init__(self, payload, status: int = 200) -> None:
        super().__init__(json.dumps(payload).encode("utf-8"))
        self.status = status


def _client(token: str | None = "secret") -> JellyfinClient:
    return JellyfinClient(JellyfinSettings(base_url="http://jellyfin:8096/", api_token=token))


class TestJellyfinClient(unittest.TestCase):
    def test_fetch_artists_keeps_complete_entries(self) -> None:
        payload = {
            "Items": [
                {"Name": "Beyonce", "Id": "1"},
                {"Name": "  ", "Id": "2"},
                {"Name": "No Id"},
                {"Name": "Blank Id", "Id": ""},
                {"Name": 42, "Id": "3"},
                {"Name": "Gang Starr", "Id": "4"},
            ]
        }
        requests = []

        def _urlopen(req, timeout):
            requests.append((req, timeout))
            return _FakeResponse(payload)

        with patch("urllib.request.urlopen", side_effect=_urlopen):
            artists = _client().fetch_artists()

        self.assertEqual(
            artists,
            [ArtistRecord(id="1", name="Beyonce"), ArtistRecord(id="4", name="Gang Starr")],
        )
        req, timeout = requests[0]
        self.assertEqual(
            req.full_url,
            "http://jellyfin:8096/Artists?SortBy=SortName&SortOrder=Ascending&Limit=10000&Recursive=true",
        )
        self.assertEqual(req.get_header("X-emby-token"), "secret")
        self.assertEqual(timeout, 10.0)

    def test_no_token_header_without_token(self) -> None:
        requests = []

        def _urlopen(req, timeout):
            requests.append(req)
            return _FakeResponse({"Items": []})

        with patch("urllib.request.urlopen", side_effect=_urlopen):
            self.assertEqual(_client(token=None).fetch_artists(), [])
        self.assertIsNone(requests[0].get_header("X-emby-token"))

    def test_http_error_returns_empty_list(self) -> None:
        error = urllib.error.HTTPError("http://jellyfin:8096/Artists", 401, "Unauthorized", None, None)
        with patch("urllib.request.urlopen", side_effect=error):
            with self.assertLogs("jellyfin_helper.providers.jellyfin", level="WARNING") as logs:
                self.assertEqual(_client().fetch_artists(), [])
        self.assertIn("HTTP 401", "\n".join(logs.output))

    def test_network_error_returns_empty_list(self) -> None:
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("dns")):
            with self.assertLogs("jellyfin_helper.providers.jellyfin", level="WARNING"):
                self.assertEqual(_client().fetch_artists(), [])

    def test_unexpected_payload_returns_empty_list(self) -> None:
        with patch("urllib.request.urlopen", return_value=_FakeResponse(["not", "a", "dict"])):
            self.assertEqual(_client().fetch_artists(), [])
        with patch("urllib.request.urlopen", return_value=_FakeResponse({"Items": "nope"})):
            self.assertEqual(_client().fetch_artists(), [])

    def test_fetch_albums_unique_and_sorted(self) -> None:
        payload = {"Items": [{"Name": "b-sides"}, {"Name": "Anthology"}, {"Name": "b-sides"}, {"Name": ""}]}
        requests = []

        def _urlopen(req, timeout):
            requests.append(req)
            return _FakeResponse(payload)

        with patch("urllib.request.urlopen", side_effect=_urlopen):
            albums = _client().fetch_albums_for_artist("abc123")

        self.assertEqual(albums, ["Anthology", "b-sides"])
        self.assertTrue(requests[0].full_url.endswith("&ArtistIds=abc123"))

    def test_build_url(self) -> None:
        client = _client()
        self.assertEqual(client.build_url("Users"), "http://jellyfin:8096/Users")
        self.assertEqual(client.build_url("/Users"), "http://jellyfin:8096/Users")
        self.assertEqual(client.build_url("https://other/x"), "https://other/x")

    def test_ping(self) -> None:
        info = {"ServerName": "home", "Version": "10.9.0"}
        with patch("urllib.request.urlopen", return_value=_FakeResponse(info)):
            self.assertEqual(_client().ping(), info)
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("refused")):
            with self.assertRaises(JellyfinError):
                _client().ping()


if __name__ == "__main__":
    unittest.main()
