"""
Match Aggregator

Keeps the running kill statistics of the match being read and snapshots them
into an immutable Match when the match ends.
"""

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .means_of_death import MeanOfDeath

WORLD = "<world>"


@dataclass(frozen=True)
class Match:
    """Kill statistics of one finished match."""

    total_kills: int = 0
    players: Tuple[str, ...] = ()
    kills: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    kills_by_means: Mapping[MeanOfDeath, int] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the match to its report representation.

        Returns:
            Dictionary with total_kills, players, kills and kills_by_means,
            the latter keyed by the log token of each cause.
        """
        return {
            "total_kills": self.total_kills,
            "players": list(self.players),
            "kills": dict(self.kills),
            "kills_by_means": {mean.token: count for mean, count in self.kills_by_means.items()},
        }


class MatchAggregator:
    """Mutable state of the match currently being read."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.total_kills = 0
        self.players: List[str] = []
        self.kills: Dict[str, int] = {}
        self.kills_by_means: Counter = Counter()

    def _add_player(self, name: str) -> None:
        if name not in self.players:
            self.players.append(name)

    def record_kill(self, killer: str, victim: str, mean: MeanOfDeath) -> None:
        """
        Apply one kill to the match.

        A kill by <world> takes one kill away from the victim, but only if the
        victim already has an entry, and never below zero.

        Args:
            killer: Killer name, or <world> for environmental deaths.
            victim: Victim name.
            mean: Cause of death.
        """
        self.total_kills += 1
        self.kills_by_means[mean] += 1
        self._add_player(victim)

        if killer == WORLD:
            if victim in self.kills:
                self.kills[victim] = max(0, self.kills[victim] - 1)
            return

        self._add_player(killer)
        self.kills[killer] = self.kills.get(killer, 0) + 1

    def finalize(self) -> Match:
        """
        Snapshot the current match and start a new, empty one.

        Returns:
            The finished Match.
        """
        match = Match(
            total_kills=self.total_kills,
            players=tuple(self.players),
            kills=MappingProxyType(dict(self.kills)),
            kills_by_means=MappingProxyType(dict(self.kills_by_means)),
        )
        self._reset()
        return match
