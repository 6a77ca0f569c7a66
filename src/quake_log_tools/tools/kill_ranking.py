#!/usr/bin/env python3
"""
Quake Log Tools - Kill Ranking

Ranks the players of a Quake III Arena games.log by their net kills summed
over all matches, and totals kills by cause of death. Results are logged,
saved to CSV and optionally exported to an Excel workbook.
"""

import argparse
import logging
import os
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from openpyxl.utils import get_column_letter

from ..base import QuakeTool
from ..game import Match, MeanOfDeath
from .match_log_tool import MatchLogTool

logger = logging.getLogger(__name__)


class KillRankingTool(MatchLogTool):
    """
    Ranks players by kills across every match of a server log.
    """

    CSV_HEADERS = ["Rank", "Player", "Kills", "Matches"]
    MEANS_HEADERS = ["Mean of Death", "Label", "Kills"]
    MATCH_HEADERS = ["Game", "Total Kills", "Players"]

    def rank_players(self, matches: List[Match]) -> List[Tuple[str, int, int]]:
        """
        Sum each player's net kills over all matches.

        Args:
            matches: Match history of the log

        Returns:
            List of (player, kills, matches played) sorted by kills
            descending, then by name
        """
        kills = Counter()
        played = Counter()

        for match in matches:
            for player in match.players:
                played[player] += 1
                kills[player] += match.kills.get(player, 0)

        return sorted(
            ((player, kills[player], played[player]) for player in played),
            key=lambda row: (-row[1], row[0])
        )

    def total_by_means(self, matches: List[Match]) -> List[Tuple[MeanOfDeath, int]]:
        """Kills per cause of death over all matches, most frequent first."""
        totals = Counter()
        for match in matches:
            totals.update(match.kills_by_means)
        return totals.most_common()

    def print_results(self, ranking: List[Tuple[str, int, int]],
                      means: List[Tuple[MeanOfDeath, int]]) -> int:
        """
        Log the ranking and the causes of death.

        Returns:
            Sum of the ranked players' net kills
        """
        if not ranking:
            logger.info("No players found.")
            return 0

        logger.info("Kills per player (ranked):")
        logger.info("=" * 50)

        grand_total = 0
        for rank, (player, count, played) in enumerate(ranking, start=1):
            logger.info(f"{rank:3d}. {player}: {count} kills in {played} matches")
            grand_total += count

        logger.info("=" * 50)
        for mean, count in means:
            logger.info(f"{mean.label:>16}: {count} ({mean.token})")
        logger.info("=" * 50)
        logger.info(f"Grand Total (GT) of player kills: {grand_total}")

        return grand_total

    def _prepare_csv_data(self, ranking: List[Tuple[str, int, int]]) -> List[Dict[str, Any]]:
        return [
            {"Rank": rank, "Player": player, "Kills": count, "Matches": played}
            for rank, (player, count, played) in enumerate(ranking, start=1)
        ]

    def save_to_csv(self, ranking: List[Tuple[str, int, int]]) -> str:
        """
        Save the ranking to a timestamped CSV file.

        Returns:
            Path to the saved CSV file
        """
        output_file = self.generate_timestamped_filename("kill_ranking", "csv")
        file_path = self.write_csv(self._prepare_csv_data(ranking), output_file, headers=self.CSV_HEADERS)
        logger.info(f"Kill ranking saved to: {file_path}")
        return file_path

    def save_to_excel(self, ranking: List[Tuple[str, int, int]],
                      means: List[Tuple[MeanOfDeath, int]], matches: List[Match]) -> str:
        """
        Export ranking, causes of death and per-match totals to an Excel workbook.

        Returns:
            Path to the saved workbook
        """
        excel_path = self._output_path(self.generate_timestamped_filename("kill_ranking", "xlsx"))
        os.makedirs(os.path.dirname(excel_path), exist_ok=True)

        sheets = {
            "Ranking": pd.DataFrame(self._prepare_csv_data(ranking), columns=self.CSV_HEADERS),
            "Means of Death": pd.DataFrame(
                [(mean.token, mean.label, count) for mean, count in means], columns=self.MEANS_HEADERS),
            "Matches": pd.DataFrame(
                [(f"game_{number}", match.total_kills, len(match.players))
                 for number, match in enumerate(matches, start=1)],
                columns=self.MATCH_HEADERS),
        }

        with pd.ExcelWriter(excel_path, engine='openpyxl') as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                worksheet = writer.sheets[sheet_name]

                # Fit column widths to content
                for idx, column in enumerate(df.columns, 1):
                    values = [str(column)] + [str(value) for value in df[column]]
                    width = max(len(value) for value in values) + 2
                    worksheet.column_dimensions[get_column_letter(idx)].width = width

        logger.info(f"Kill ranking exported to {excel_path}")
        return excel_path

    def run(self, log_file: Optional[str] = None, log_url: Optional[str] = None,
            excel: bool = False) -> Dict[str, Any]:
        """
        Run the kill ranking.

        Args:
            log_file: Path to games.log
            log_url: URL of games.log, used instead of log_file when given
            excel: Also export an Excel workbook

        Returns:
            Dictionary with analysis results

        Raises:
            LogParseError: If the log holds a structurally invalid Kill line.
        """
        location = self.resolve_log_location(log_file, log_url)
        logger.info("Starting kill ranking...")

        matches = self.read_matches(location)
        ranking = self.rank_players(matches)
        means = self.total_by_means(matches)

        result = {
            "success": True,
            "kill_count": sum(match.total_kills for match in matches),
            "player_count": len(ranking),
            "ranking": ranking,
            "output_file": None,
            "excel_file": None,
        }

        if not result["kill_count"]:
            logger.warning("No kill events found in the log.")
            result["success"] = False
            return result

        self.print_results(ranking, means)
        result["output_file"] = self.save_to_csv(ranking)
        if excel:
            result["excel_file"] = self.save_to_excel(ranking, means, matches)

        logger.info(f"Ranking complete: {result['kill_count']} kills, {len(ranking)} players")
        return result


def main():
    """
    Main entry point for the kill ranking command line tool.
    """
    parser = argparse.ArgumentParser(
        description="Rank the players of a Quake III Arena games.log by kills.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --log-file /path/to/games.log
    %(prog)s --log-url https://example.org/logs/games.log --excel
    %(prog)s --profile my_server

Configuration:
    - paths.log_file: games.log used when no log is given
    - general.output_path: Directory for CSV and Excel files
        """
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--log-file", help="Path to the games.log file.")
    source_group.add_argument("--log-url", help="URL to download the games.log from.")
    parser.add_argument("--excel", action="store_true", help="Also export the ranking to an Excel workbook.")

    QuakeTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = KillRankingTool.load_config(args.profile)

        tool = KillRankingTool(config)
        result = tool.run(args.log_file, args.log_url, args.excel)

        if args.console:
            logger.info(f"Kill ranking completed: {result['player_count']} players, "
                        f"{result['kill_count']} kills")

        return 0 if result["success"] else 1

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
