"""
Line Classifier

Decides what a single line of a Quake III Arena games.log means for match
statistics: the start of a new match, a kill, or nothing at all. Kill lines
look like this::

     20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT

The killer clause ends at "killed"; the victim and the cause of death are
separated by "by".
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import MalformedKillLine, MissingCauseOfDeath, UnrecognizedCause
from .means_of_death import MeanOfDeath, parse_mean_of_death

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boundary:
    """A line starting a new match."""

    position: int
    opens_first_match: bool


@dataclass(frozen=True)
class KillEvent:
    """A Kill line split into its raw killer clause and the remainder."""

    position: int
    line: str
    killer_raw: str
    victim_and_cause_raw: str


@dataclass(frozen=True)
class Ignore:
    """A line with no effect on match statistics."""

    position: int


LineOutcome = Union[Boundary, KillEvent, Ignore]


@dataclass(frozen=True)
class Kill:
    """A fully extracted kill."""

    killer: str
    victim: str
    mean: MeanOfDeath


class LineClassifier:
    """
    Classifies raw log lines and extracts kills from Kill lines.

    The classifier is stateless: the same line at the same position always
    yields the same outcome.
    """

    BOUNDARY_MARKER = "InitGame:"
    KILL_MARKER = "Kill"
    DIVIDER_MARKER = "------"
    KILL_KEYWORD = "killed"
    CAUSE_KEYWORD = "by"
    CLAUSE_TERMINATOR = ":"

    # Boundaries within the first lines open the first match instead of closing one
    OPENING_BOUNDARY_MAX_POSITION = 2

    # Split once on "by" as a separate word
    CAUSE_SEPARATOR_PATTERN = re.compile(r'\s+by(?:\s+|$)')

    def classify(self, line: str, position: int) -> LineOutcome:
        """
        Classify a log line.

        Args:
            line: The raw line.
            position: 0-based index of the line in the log.

        Returns:
            Boundary, KillEvent or Ignore.

        Raises:
            MalformedKillLine: If a Kill line has no "killed" clause.
        """
        if self.BOUNDARY_MARKER in line:
            return Boundary(position, position <= self.OPENING_BOUNDARY_MAX_POSITION)

        if self.KILL_MARKER not in line or self.DIVIDER_MARKER in line:
            return Ignore(position)

        parts = line.split(self.KILL_KEYWORD, 1)
        if len(parts) < 2:
            raise MalformedKillLine(position=position, line=line)

        return KillEvent(position, line, parts[0], parts[1])

    def _has_empty_name(self, killer_part: str, rest_part: str) -> bool:
        """Check for the log quirk where a player name was written empty."""
        if killer_part.endswith(self.CLAUSE_TERMINATOR):
            return True
        first_word = rest_part.split(None, 1)[0] if rest_part else ""
        return first_word == self.CAUSE_KEYWORD

    def extract(self, event: KillEvent) -> Optional[Kill]:
        """
        Extract killer, victim and cause of death from a Kill line.

        Args:
            event: The KillEvent returned by classify().

        Returns:
            The Kill, or None when the line is skipped because a player name
            is empty.

        Raises:
            MissingCauseOfDeath: If no cause of death follows the victim.
            UnrecognizedCause: If the cause of death token is unknown.
        """
        killer_part = event.killer_raw.strip()
        rest_part = event.victim_and_cause_raw.strip()

        if self._has_empty_name(killer_part, rest_part):
            logger.warning(f"Skipping kill with empty player name on line {event.position + 1}: "
                           f"{event.line.strip()}")
            return None

        killer = killer_part.rsplit(self.CLAUSE_TERMINATOR, 1)[-1].strip()

        parts = self.CAUSE_SEPARATOR_PATTERN.split(rest_part, maxsplit=1)
        if len(parts) < 2 or not parts[1].strip():
            raise MissingCauseOfDeath(position=event.position, line=event.line)

        victim = parts[0].strip()
        token = parts[1].strip()

        try:
            mean = parse_mean_of_death(token)
        except UnrecognizedCause as e:
            raise UnrecognizedCause(e.token, event.position, event.line) from None

        return Kill(killer, victim, mean)
