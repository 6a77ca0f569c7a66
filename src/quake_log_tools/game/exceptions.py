"""
Errors raised while parsing a Quake III Arena server log.

All of them abort the run. Recoverable oddities of the log (a Kill line with
an empty player name) are logged and skipped instead of raised.
"""

from typing import Any, List, Optional


class LogParseError(Exception):
    """
    Base class for hard parsing errors.

    Attributes:
        position: 0-based index of the failing line in the log, if known.
        line: The raw failing line, if known.
        history: Matches finalized before the run was aborted.
    """

    description = "Could not parse log"

    def __init__(self, message: Optional[str] = None, position: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        self.message = message or self.description
        self.position = position
        self.line = line
        self.history: List[Any] = []
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.position is not None:
            text = f"{text} (line {self.position + 1})"
        if self.line is not None:
            text = f"{text}: {self.line.strip()!r}"
        return text


class MalformedKillLine(LogParseError):
    """A Kill line that cannot be split into killer and victim clauses."""

    description = "Malformed kill line"


class MissingCauseOfDeath(LogParseError):
    """A Kill line naming both players but without a cause of death."""

    description = "Kill line has no cause of death"


class UnrecognizedCause(LogParseError, ValueError):
    """A cause of death token outside the known vocabulary."""

    description = "Unrecognized cause of death"

    def __init__(self, token: str, position: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        self.token = token
        super().__init__(f"{self.description} '{token}'", position, line)
