"""
Shared base for tools that read the matches of a games.log.
"""

import logging
from typing import Any, Dict, List, Optional

from ..base import JSONTool
from ..game import Match, MatchSequencer
from ..log.log_source import open_log_source

logger = logging.getLogger(__name__)


class MatchLogTool(JSONTool):
    """Base class for tools working on the match history of a server log."""

    DEFAULT_TIMEOUT = 30

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(config)
        self.default_log_file = self.get_config('paths.log_file')
        self.timeout = self.get_config('log_source.timeout', self.DEFAULT_TIMEOUT)
        self.ssl_verify = self.get_config('log_source.ssl_verify', True)

    def resolve_log_location(self, log_file: Optional[str] = None,
                             log_url: Optional[str] = None) -> str:
        """
        Pick the log to read: explicit URL, explicit file, then configured file.

        Raises:
            ValueError: If no log is given and none is configured.
        """
        if log_url:
            return log_url
        if log_file:
            return self.resolve_path(log_file)
        if self.default_log_file:
            return self.resolve_path(self.default_log_file)
        raise ValueError("No log given. Use --log-file/--log-url or set paths.log_file in the profile.")

    def read_matches(self, location: str) -> List[Match]:
        """
        Read a log and build its match history.

        Args:
            location: Log file path or URL.

        Returns:
            Matches in the order they were played.

        Raises:
            LogParseError: If the log holds a structurally invalid Kill line.
        """
        sequencer = MatchSequencer()
        with open_log_source(location, timeout=self.timeout, verify=self.ssl_verify) as source:
            matches = sequencer.run(source)

        logger.info(f"Found {len(matches)} matches with {sequencer.kill_count} kills in {location}")
        return matches
