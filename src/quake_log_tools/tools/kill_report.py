#!/usr/bin/env python3
"""
Quake Log Tools - Kill Report

Reads a Quake III Arena games.log and writes a JSON report with the kill
statistics of every match: total kills, players, net kills per player and
kills by cause of death.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional

from ..base import QuakeTool
from ..game import Match
from .match_log_tool import MatchLogTool

logger = logging.getLogger(__name__)


class KillReportTool(MatchLogTool):
    """
    Builds the per-match kill report of a server log.

    Nothing is written when the log cannot be parsed.
    """

    REPORT_BASE_NAME = "kill_report"
    GAME_KEY_FORMAT = "game_{}"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.indent = self.get_config('report.indent', 2)

    def build_report(self, matches: List[Match]) -> Dict[str, Dict[str, Any]]:
        """
        Convert a match history into the report structure.

        Args:
            matches: Matches in play order.

        Returns:
            Dictionary keyed game_1, game_2, ... in match order.
        """
        return {
            self.GAME_KEY_FORMAT.format(number): match.to_dict()
            for number, match in enumerate(matches, start=1)
        }

    def save_report(self, report: Dict[str, Any], output_file: Optional[str] = None) -> str:
        """
        Write the report as JSON.

        Args:
            report: Report from build_report().
            output_file: Target path; defaults to a timestamped file in the output directory.

        Returns:
            Path to the written file.
        """
        if output_file is None:
            output_file = self.generate_timestamped_filename(self.REPORT_BASE_NAME, "json")
        return self.write_json(report, output_file, indent=self.indent)

    def run(self, log_file: Optional[str] = None, log_url: Optional[str] = None,
            output_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the kill report.

        Args:
            log_file: Path to games.log
            log_url: URL of games.log, used instead of log_file when given
            output_file: Optional report path

        Returns:
            Dictionary with the report and run summary

        Raises:
            LogParseError: If the log holds a structurally invalid Kill line.
        """
        location = self.resolve_log_location(log_file, log_url)
        logger.info("Starting kill report...")

        matches = self.read_matches(location)
        report = self.build_report(matches)
        output_path = self.save_report(report, output_file)

        kill_count = sum(match.total_kills for match in matches)
        logger.info(f"Kill report complete: {len(matches)} matches, {kill_count} kills")

        return {
            "success": True,
            "match_count": len(matches),
            "kill_count": kill_count,
            "output_file": output_path,
            "report": report,
        }


def main():
    """
    Main entry point for the kill report command line tool.
    """
    parser = argparse.ArgumentParser(
        description="Write per-match kill statistics of a Quake III Arena games.log as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --log-file /path/to/games.log
    %(prog)s --log-url https://example.org/logs/games.log --output report.json
    %(prog)s --profile my_server

Configuration:
    - paths.log_file: games.log used when no log is given
    - general.output_path: Directory for JSON reports
    - report.indent: JSON indentation
        """
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--log-file", help="Path to the games.log file.")
    source_group.add_argument("--log-url", help="URL to download the games.log from.")
    parser.add_argument("--output", help="Path of the JSON report (default: timestamped file in the output directory).")

    QuakeTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = KillReportTool.load_config(args.profile)

        tool = KillReportTool(config)
        result = tool.run(args.log_file, args.log_url, args.output)

        if args.console:
            logger.info(f"Kill report: {result['match_count']} matches, "
                        f"{result['kill_count']} kills, written to {result['output_file']}")

        return 0

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
