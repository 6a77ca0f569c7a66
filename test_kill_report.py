#!/usr/bin/env python3
"""Tests for the JSON kill report tool."""

import json
import sys

import pytest

from quake_log_tools.game import UnrecognizedCause
from quake_log_tools.tools import kill_report
from quake_log_tools.tools.kill_report import KillReportTool

GAMES_LOG = r"""  0:00 ------------------------------------------------------------
  0:00 InitGame: \sv_floodProtect\1\sv_maxPing\0\sv_minPing\0\sv_maxRate\10000
 20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 20:54 Kill: 1022 2 22: Isgalamido killed Dono da Bola by MOD_TRIGGER_HURT
 20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_FALLING
 21:10 ShutdownGame:
 21:15 ------------------------------------------------------------
 21:15 InitGame: \sv_floodProtect\1\sv_maxPing\0\sv_minPing\0\sv_maxRate\10000
 22:06 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_ROCKET_SPLASH
"""


@pytest.fixture
def config(tmp_path):
    return {
        "general": {
            "output_path": str(tmp_path / "output"),
        },
        "report": {"indent": 4},
    }


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "games.log"
    path.write_text(GAMES_LOG, encoding="utf-8")
    return str(path)


def test_report_is_written_in_match_order(config, log_file, tmp_path):
    tool = KillReportTool(config)
    result = tool.run(log_file=log_file, output_file=str(tmp_path / "report.json"))

    assert result["success"]
    assert result["match_count"] == 2
    assert result["kill_count"] == 4

    with open(result["output_file"], encoding="utf-8") as f:
        report = json.load(f)

    assert list(report) == ["game_1", "game_2"]
    assert report["game_1"] == {
        "total_kills": 3,
        "players": ["Isgalamido", "Dono da Bola"],
        "kills": {"Isgalamido": 0},
        "kills_by_means": {"MOD_TRIGGER_HURT": 2, "MOD_FALLING": 1},
    }
    assert report["game_2"] == {
        "total_kills": 1,
        "players": ["Mocinha", "Isgalamido"],
        "kills": {"Isgalamido": 1},
        "kills_by_means": {"MOD_ROCKET_SPLASH": 1},
    }


def test_default_report_goes_to_output_dir(config, log_file, tmp_path):
    result = KillReportTool(config).run(log_file=log_file)

    output_file = result["output_file"]
    assert output_file.startswith(str(tmp_path / "output"))
    assert output_file.endswith(".json")


def test_configured_log_file_is_used(config, log_file):
    config["paths"] = {"log_file": log_file}
    result = KillReportTool(config).run()
    assert result["match_count"] == 2


def test_missing_log_location(config):
    with pytest.raises(ValueError):
        KillReportTool(config).run()


def test_nothing_written_on_hard_error(config, tmp_path):
    bad_log = tmp_path / "bad.log"
    bad_log.write_text(GAMES_LOG + " 23:00 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_NUKE\n",
                       encoding="utf-8")

    with pytest.raises(UnrecognizedCause):
        KillReportTool(config).run(log_file=str(bad_log))

    assert list((tmp_path / "output").iterdir()) == []


def test_main_exit_codes(config, log_file, tmp_path, monkeypatch):
    monkeypatch.setattr(KillReportTool, "load_config", staticmethod(lambda profile=None: config))

    output = str(tmp_path / "main_report.json")
    monkeypatch.setattr(sys, "argv", ["quake-kill-report", "--log-file", log_file, "--output", output])
    assert kill_report.main() == 0

    monkeypatch.setattr(sys, "argv", ["quake-kill-report", "--log-file", str(tmp_path / "missing.log")])
    assert kill_report.main() == 1


def test_only_output_directory_is_created(log_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = KillReportTool({"general": {"output_path": "output"}}).run(log_file=log_file)

    assert result["success"]
    assert (tmp_path / "output").is_dir()
    assert not (tmp_path / "logs").exists()
