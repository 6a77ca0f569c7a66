"""
Quake Log Sources

Utilities for reading Quake III Arena server logs from disk or over HTTP.
"""

__all__ = ['FileLogSource', 'UrlLogSource', 'open_log_source']

from .log_source import FileLogSource, UrlLogSource, open_log_source
