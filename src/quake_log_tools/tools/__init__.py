"""
Quake Log Analysis Tools

This package provides the command line tools working on Quake III Arena
server logs: the per-match kill report and the player kill ranking.
"""

from .kill_ranking import KillRankingTool
from .kill_report import KillReportTool
from .match_log_tool import MatchLogTool

__all__ = [
    'KillRankingTool',
    'KillReportTool',
    'MatchLogTool',
]
