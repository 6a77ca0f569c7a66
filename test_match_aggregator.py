#!/usr/bin/env python3
"""Tests for the per-match kill aggregation."""

import pytest

from quake_log_tools.game import WORLD, Match, MatchAggregator, MeanOfDeath


def test_new_aggregator_finalizes_to_an_empty_match():
    aggregator = MatchAggregator()
    assert aggregator.finalize() == Match()


def test_world_kill_without_entry_creates_nothing():
    aggregator = MatchAggregator()
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.TRIGGER_HURT)

    assert aggregator.total_kills == 1
    assert aggregator.players == ["Isgalamido"]
    assert aggregator.kills == {}
    assert aggregator.kills_by_means == {MeanOfDeath.TRIGGER_HURT: 1}


def test_player_kill_credits_killer():
    aggregator = MatchAggregator()
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.TRIGGER_HURT)
    aggregator.record_kill("Isgalamido", "Dono da Bola", MeanOfDeath.TRIGGER_HURT)

    assert aggregator.total_kills == 2
    assert aggregator.players == ["Isgalamido", "Dono da Bola"]
    assert aggregator.kills == {"Isgalamido": 1}
    assert aggregator.kills_by_means == {MeanOfDeath.TRIGGER_HURT: 2}


def test_world_kill_floors_existing_entry_at_zero():
    aggregator = MatchAggregator()
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.TRIGGER_HURT)
    aggregator.record_kill("Isgalamido", "Dono da Bola", MeanOfDeath.TRIGGER_HURT)
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.FALLING)
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.FALLING)

    assert aggregator.total_kills == 4
    assert aggregator.kills == {"Isgalamido": 0}
    assert aggregator.kills_by_means == {MeanOfDeath.TRIGGER_HURT: 2, MeanOfDeath.FALLING: 2}


def test_players_keep_first_seen_order_without_duplicates():
    aggregator = MatchAggregator()
    aggregator.record_kill("Zeh", "Mal", MeanOfDeath.RAILGUN)
    aggregator.record_kill("Mal", "Zeh", MeanOfDeath.RAILGUN)
    aggregator.record_kill(WORLD, "Assasinu Credi", MeanOfDeath.LAVA)
    aggregator.record_kill("Zeh", "Assasinu Credi", MeanOfDeath.SHOTGUN)

    assert aggregator.players == ["Mal", "Zeh", "Assasinu Credi"]
    assert aggregator.kills == {"Zeh": 2, "Mal": 1}


def test_finalize_returns_snapshot_and_resets():
    aggregator = MatchAggregator()
    aggregator.record_kill("Zeh", "Mal", MeanOfDeath.RAILGUN)

    match = aggregator.finalize()
    assert match.total_kills == 1
    assert match.players == ("Mal", "Zeh")
    assert match.kills == {"Zeh": 1}
    assert match.kills_by_means == {MeanOfDeath.RAILGUN: 1}
    assert aggregator.finalize() == Match()

    aggregator.record_kill("Mal", "Zeh", MeanOfDeath.RAILGUN)
    assert match.kills == {"Zeh": 1}


def test_match_snapshot_is_immutable():
    aggregator = MatchAggregator()
    aggregator.record_kill("Zeh", "Mal", MeanOfDeath.RAILGUN)
    match = aggregator.finalize()

    with pytest.raises(TypeError):
        match.kills["Zeh"] = 5
    with pytest.raises(AttributeError):
        match.total_kills = 0


def test_match_to_dict_uses_log_tokens():
    aggregator = MatchAggregator()
    aggregator.record_kill(WORLD, "Isgalamido", MeanOfDeath.TRIGGER_HURT)
    aggregator.record_kill("Isgalamido", "Mocinha", MeanOfDeath.ROCKET_SPLASH)

    assert aggregator.finalize().to_dict() == {
        "total_kills": 2,
        "players": ["Isgalamido", "Mocinha"],
        "kills": {"Isgalamido": 1},
        "kills_by_means": {"MOD_TRIGGER_HURT": 1, "MOD_ROCKET_SPLASH": 1},
    }
