"""
Quake III Arena match statistics

This package turns the lines of a games.log into per-match kill statistics:
total kills, players, net kills per player and kills by cause of death.
"""

from .exceptions import LogParseError, MalformedKillLine, MissingCauseOfDeath, UnrecognizedCause
from .line_classifier import Boundary, Ignore, Kill, KillEvent, LineClassifier
from .match_aggregator import WORLD, Match, MatchAggregator
from .match_sequencer import MatchSequencer
from .means_of_death import MeanOfDeath, parse_mean_of_death

__all__ = [
    'Boundary',
    'Ignore',
    'Kill',
    'KillEvent',
    'LineClassifier',
    'LogParseError',
    'MalformedKillLine',
    'Match',
    'MatchAggregator',
    'MatchSequencer',
    'MeanOfDeath',
    'MissingCauseOfDeath',
    'UnrecognizedCause',
    'WORLD',
    'parse_mean_of_death',
]
