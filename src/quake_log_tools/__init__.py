"""
Quake Log Tools - Python package for Quake III Arena server logs

This package reads games.log files written by a Quake III Arena server and
derives per-match kill statistics, with tools to report and rank them.
"""

__version__ = '1.0.0'
