"""
Log Sources

Line sources for Quake III Arena server logs: a local games.log file or a log
published over HTTP(S). Both are context managers yielding the lines of the
log in order, without line terminators.
"""

import logging
from typing import Iterator, Optional, Union

import requests

logger = logging.getLogger(__name__)

URL_SCHEMES = ('http://', 'https://')


class FileLogSource:
    """Lines of a log file on disk."""

    def __init__(self, path: str, encoding: str = 'utf-8') -> None:
        self.path = path
        self.encoding = encoding
        self._file = None

    def __enter__(self) -> 'FileLogSource':
        logger.info(f"Reading log file: {self.path}")
        self._file = open(self.path, 'r', encoding=self.encoding, errors='replace', newline='\n')
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[str]:
        if self._file is None:
            raise RuntimeError("Log source is not open")
        for line in self._file:
            yield line.rstrip('\r\n')


class UrlLogSource:
    """Lines of a log downloaded over HTTP(S), streamed as they arrive."""

    CHUNK_SIZE = 8192

    def __init__(self, url: str, timeout: float = 30, verify: bool = True,
                 encoding: str = 'utf-8') -> None:
        self.url = url
        self.timeout = timeout
        self.verify = verify
        self.encoding = encoding
        self._response: Optional[requests.Response] = None

    def __enter__(self) -> 'UrlLogSource':
        logger.info(f"Downloading log from: {self.url}")
        try:
            response = requests.get(self.url, stream=True, timeout=self.timeout, verify=self.verify)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download log: {e}")
            if getattr(e, 'response', None) is not None:
                logger.error(f"Response status: {e.response.status_code}")
            raise
        self._response = response
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
            self._response = None

    def __iter__(self) -> Iterator[str]:
        if self._response is None:
            raise RuntimeError("Log source is not open")
        # Split on LF only, as the file source does; a bare CR stays in the line
        pending = b""
        for chunk in self._response.iter_content(chunk_size=self.CHUNK_SIZE):
            pending += chunk
            *raw_lines, pending = pending.split(b"\n")
            for raw_line in raw_lines:
                yield self._decode(raw_line)
        if pending:
            yield self._decode(pending)

    def _decode(self, raw_line: bytes) -> str:
        return raw_line.decode(self.encoding, errors='replace').rstrip('\r')


LogSource = Union[FileLogSource, UrlLogSource]


def open_log_source(location: str, timeout: float = 30, verify: bool = True) -> LogSource:
    """
    Create the log source matching a location.

    Args:
        location: A file path, or an http:// or https:// URL.
        timeout: HTTP timeout in seconds for URLs.
        verify: Whether to verify TLS certificates for URLs.

    Returns:
        An unopened log source; use it in a with statement.
    """
    if location.lower().startswith(URL_SCHEMES):
        return UrlLogSource(location, timeout=timeout, verify=verify)
    return FileLogSource(location)
