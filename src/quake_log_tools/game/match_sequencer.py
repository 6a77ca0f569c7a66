"""
Match Sequencer

Reads the lines of a games.log in order and turns them into the list of
matches it contains.
"""

import logging
from typing import Iterable, List, Optional

from .exceptions import LogParseError
from .line_classifier import Boundary, KillEvent, LineClassifier
from .match_aggregator import Match, MatchAggregator

logger = logging.getLogger(__name__)


class MatchSequencer:
    """
    Drives the line classifier and the match aggregator over a log.

    Attributes:
        history: Matches finalized so far, in closing order.
        lines_processed: Number of lines read by the last run.
        kill_count: Number of kills applied by the last run.
        skipped_count: Number of Kill lines skipped by the last run.
    """

    def __init__(self, classifier: Optional[LineClassifier] = None) -> None:
        self.classifier = classifier or LineClassifier()
        self.history: List[Match] = []
        self.lines_processed = 0
        self.kill_count = 0
        self.skipped_count = 0

    def run(self, lines: Iterable[str]) -> List[Match]:
        """
        Build the match history of a log.

        The match still open when the lines run out is appended as the last
        entry, even if it is empty.

        Args:
            lines: Log lines in file order, consumed once.

        Returns:
            List of matches in the order they were played.

        Raises:
            LogParseError: On the first structurally invalid Kill line. The
                error's history holds the matches finalized before it.
        """
        self.history = []
        self.lines_processed = 0
        self.kill_count = 0
        self.skipped_count = 0
        aggregator = MatchAggregator()

        for position, line in enumerate(lines):
            self.lines_processed += 1
            try:
                self._process_line(aggregator, line, position)
            except LogParseError as e:
                e.history = list(self.history)
                logger.debug(f"Aborting after {len(self.history)} matches: {e}")
                raise

        self.history.append(aggregator.finalize())

        logger.info(f"Processed {self.lines_processed} lines: {len(self.history)} matches, "
                    f"{self.kill_count} kills, {self.skipped_count} skipped kill lines")
        return self.history

    def _process_line(self, aggregator: MatchAggregator, line: str, position: int) -> None:
        outcome = self.classifier.classify(line, position)

        if isinstance(outcome, Boundary):
            if outcome.opens_first_match:
                logger.debug(f"Opening boundary on line {position + 1}")
                return
            self.history.append(aggregator.finalize())
            logger.debug(f"Match {len(self.history)} closed on line {position + 1}")
            return

        if isinstance(outcome, KillEvent):
            kill = self.classifier.extract(outcome)
            if kill is None:
                self.skipped_count += 1
                return
            aggregator.record_kill(kill.killer, kill.victim, kill.mean)
            self.kill_count += 1
