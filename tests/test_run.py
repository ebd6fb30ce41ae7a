"""Tests for the browser launcher in run.py."""

from unittest import mock
from urllib.parse import parse_qs, urlparse

import requests

import run


class TestAppUrl:
    def test_plain(self):
        assert run.app_url(8600) == "http://localhost:8600"

    def test_root_passed_as_absolute_query_param(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        url = run.app_url(8501, "proj", dotfiles=True)

        parsed = urlparse(url)
        assert parsed.netloc == "localhost:8501"
        assert parse_qs(parsed.query) == {
            "root": [str(tmp_path / "proj")],
            "dotfiles": ["1"],
        }


class TestParseArgs:
    def test_defaults(self):
        args = run.parse_args([])
        assert args.root is None
        assert args.port == run.DEFAULT_PORT
        assert args.dotfiles is False

    def test_root_and_port(self):
        args = run.parse_args(["/data", "--port", "9000"])
        assert args.root == "/data"
        assert args.port == 9000


class TestWaitAndOpenBrowser:
    def test_opens_once_server_answers(self):
        ok = mock.Mock(status_code=200)
        with mock.patch.object(run.requests, "get", side_effect=[requests.ConnectionError(), ok]), \
                mock.patch.object(run.time, "sleep") as sleep, \
                mock.patch.object(run.webbrowser, "open") as open_browser:
            assert run._wait_and_open_browser(
                "http://localhost:1", "http://localhost:1/?root=%2Fx", attempts=5
            ) is True

        open_browser.assert_called_once_with("http://localhost:1/?root=%2Fx")
        sleep.assert_called_once_with(1)

    def test_gives_up_after_attempts(self):
        not_ready = mock.Mock(status_code=503)
        with mock.patch.object(run.requests, "get", return_value=not_ready), \
                mock.patch.object(run.time, "sleep"), \
                mock.patch.object(run.webbrowser, "open") as open_browser:
            assert run._wait_and_open_browser(
                "http://localhost:1", "http://localhost:1", attempts=3
            ) is False

        open_browser.assert_not_called()
