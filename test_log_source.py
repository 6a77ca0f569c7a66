#!/usr/bin/env python3
"""Tests for reading logs from files and URLs."""

from unittest import mock

import pytest
import requests

from quake_log_tools.log import FileLogSource, UrlLogSource, open_log_source


def test_file_source_yields_lines_without_newlines(tmp_path):
    log_path = tmp_path / "games.log"
    log_path.write_bytes(b"  0:00 InitGame: \\a\\b\r\n 20:54 Kill: 1 2 3: A killed B by MOD_BFG\n")

    with FileLogSource(str(log_path)) as source:
        lines = list(source)

    assert lines == ["  0:00 InitGame: \\a\\b", " 20:54 Kill: 1 2 3: A killed B by MOD_BFG"]


def test_file_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        with FileLogSource(str(tmp_path / "missing.log")):
            pass


def test_file_source_must_be_opened(tmp_path):
    source = FileLogSource(str(tmp_path / "games.log"))
    with pytest.raises(RuntimeError):
        list(source)


@mock.patch("quake_log_tools.log.log_source.requests.get")
def test_url_source_streams_lines(mock_get):
    response = mock.MagicMock()
    response.iter_content.return_value = [b"  0:00 InitGame: \\a\\b\n 1:00 Kill: 1 2 3: A ", b"killed B by MOD_BFG\r\n"]
    mock_get.return_value = response

    with UrlLogSource("https://example.org/games.log", timeout=5, verify=False) as source:
        lines = list(source)

    assert lines == ["  0:00 InitGame: \\a\\b", " 1:00 Kill: 1 2 3: A killed B by MOD_BFG"]
    mock_get.assert_called_once_with("https://example.org/games.log", stream=True, timeout=5, verify=False)
    response.close.assert_called_once()


@mock.patch("quake_log_tools.log.log_source.requests.get")
def test_url_source_propagates_http_errors(mock_get):
    response = mock.MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    mock_get.return_value = response

    with pytest.raises(requests.RequestException):
        with UrlLogSource("https://example.org/missing.log"):
            pass


def test_open_log_source_picks_source_by_scheme():
    assert isinstance(open_log_source("https://example.org/games.log"), UrlLogSource)
    assert isinstance(open_log_source("HTTP://example.org/games.log"), UrlLogSource)
    assert isinstance(open_log_source("/var/log/quake/games.log"), FileLogSource)


@mock.patch("quake_log_tools.log.log_source.requests.get")
def test_url_and_file_sources_split_lines_alike(mock_get, tmp_path):
    body = (b"  0:00 InitGame: \\a\\b\r\n"
            b" 20:54 Kill: 2 3 7: Isgalamido killed Mal\rcolm by MOD_ROCKET\r\n"
            b"\n"
            b" 21:10 ShutdownGame:")
    log_path = tmp_path / "games.log"
    log_path.write_bytes(body)

    response = mock.MagicMock()
    # Chunk boundary falls between the CR and LF of the first line
    response.iter_content.return_value = [body[:22], body[22:40], body[40:]]
    mock_get.return_value = response

    with UrlLogSource("https://example.org/games.log") as source:
        url_lines = list(source)
    with FileLogSource(str(log_path)) as source:
        file_lines = list(source)

    assert body[21:23] == b"\r\n"
    assert url_lines == file_lines
    assert url_lines == [
        "  0:00 InitGame: \\a\\b",
        " 20:54 Kill: 2 3 7: Isgalamido killed Mal\rcolm by MOD_ROCKET",
        "",
        " 21:10 ShutdownGame:",
    ]
