"""
Base classes for Quake Log Tools.

This module provides base classes used throughout the package.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
from datetime import datetime
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class QuakeTool(ABC):
    """Base class for all Quake log tools."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the tool.

        Args:
            config: Optional configuration dictionary.
        """
        self.config = config or {}
        self.setup_logging()

    @staticmethod
    def add_standard_arguments(parser):
        """
        Add standard arguments that should be consistent across all command-line tools.

        Args:
            parser: The ArgumentParser instance to add arguments to
        """
        parser.add_argument("--profile", default=None,
                          help="Configuration profile to use (default: use default profile)")
        parser.add_argument("--console", action="store_true",
                          help="Log detailed output summary (in addition to regular logging)")

    @staticmethod
    def load_config(profile: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from a specified profile.

        Args:
            profile: Name of the profile to load. If None, uses the default profile.

        Returns:
            The configuration dictionary.
        """
        from config.config import Config

        config_obj = Config(profile=profile)
        config_data = config_obj.get()

        # Set up logging based on config
        log_level = config_data.get('general', {}).get('log_level', 'INFO').upper()

        # Reset any existing handlers to avoid duplicated logs
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logging.getLogger().setLevel(getattr(logging, log_level, logging.INFO))

        logging.debug(f"Logging initialized with level: {log_level}")

        return config_data

    def setup_logging(self, level: int = logging.INFO):
        """
        Set up logging for this tool.

        Args:
            level: The logging level to use.
        """
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        logging.basicConfig(level=level, format=log_format)

    def get_config(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key in dot notation.
            default: Default value if the key is not found.

        Returns:
            The configuration value, or the default if not found.
        """
        parts = key.split('.')
        value = self.config

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @abstractmethod
    def run(self) -> Any:
        """
        Run the tool. Must be implemented by subclasses.

        Returns:
            The result of running the tool.
        """
        pass


class FileBasedTool(QuakeTool):
    """Base class for tools that work with files."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(config)
        self.output_dir = None

    def initialize_directories(self):
        """
        Initialize the output directory from configuration.
        """
        self.output_dir = self.get_config('general.output_path', 'output')

        if self.output_dir:
            resolved_output_dir = self.ensure_dir(self.output_dir)
            logger.debug(f"Output directory: {resolved_output_dir}")

    def resolve_path(self, path: str) -> str:
        """
        Resolve a path, expanding user paths and environment variables.

        Args:
            path: The path to resolve.

        Returns:
            The resolved absolute path.
        """
        expanded_path = os.path.expanduser(os.path.expandvars(path))
        return os.path.abspath(expanded_path)

    def ensure_dir(self, directory: str) -> str:
        """
        Ensure a directory exists, create it if it doesn't.

        Args:
            directory: The directory path.

        Returns:
            The absolute path to the directory.
        """
        path = Path(self.resolve_path(directory))
        os.makedirs(path, exist_ok=True)
        return str(path)

    def _output_path(self, path: str) -> str:
        """Place a relative path inside the output directory, unless it already is."""
        if self.output_dir:
            output_dir_norm = os.path.normpath(self.output_dir)
            path_norm = os.path.normpath(path)

            if not os.path.isabs(path) and not path_norm.startswith(output_dir_norm):
                path = os.path.join(self.output_dir, path)

        return self.resolve_path(path)

    def write_csv(self, data_rows: List, output_path: str, headers: List[str] = None) -> str:
        """
        Write data to a CSV file.

        Args:
            data_rows: List of dictionaries with data to write
            output_path: Path to the output CSV file
            headers: Optional list of header columns (if None, uses keys from first row)

        Returns:
            Absolute path to the created CSV file
        """
        import csv

        resolved_path = self._output_path(output_path)
        logger.debug(f"Writing CSV to {resolved_path}")

        os.makedirs(os.path.dirname(resolved_path), exist_ok=True)

        if not data_rows:
            logger.warning("No data to write to CSV.")
            with open(resolved_path, "w", newline="") as f:
                if headers:
                    writer = csv.writer(f)
                    writer.writerow(headers)
            logger.info(f"Empty CSV file created at {resolved_path}")
            return resolved_path

        if headers is None and isinstance(data_rows[0], dict):
            headers = list(data_rows[0].keys())

        with open(resolved_path, "w", newline="") as f:
            if isinstance(data_rows[0], dict) and headers:
                writer = csv.DictWriter(f, fieldnames=headers)
                writer.writeheader()
                writer.writerows(data_rows)
            else:
                writer = csv.writer(f)
                if headers:
                    writer.writerow(headers)
                writer.writerows(data_rows)

        logger.info(f"Results written to {resolved_path}")
        return resolved_path

    def generate_timestamped_filename(self, base_name: str, extension: str, prefix: str = "", suffix: str = "") -> str:
        """
        Generate a filename with a timestamp.

        Args:
            base_name: The base name for the file
            extension: File extension (without the dot)
            prefix: Optional prefix to add before the timestamp
            suffix: Optional suffix to add after the timestamp

        Returns:
            A filename in the format: base_name_prefix_YYYYMMDD_HHMMSS_suffix.extension
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        prefix_str = f"{prefix}_" if prefix else ""
        suffix_str = f"_{suffix}" if suffix else ""

        filename = f"{base_name}_{prefix_str}{timestamp}{suffix_str}.{extension}"

        # Clean up double underscores
        filename = filename.replace("__", "_").replace("__", "_")

        return filename


class JSONTool(FileBasedTool):
    """Base class for tools that work with JSON files."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(config)
        self.initialize_directories()

    def read_json(self, file_path: str) -> Any:
        """
        Read a JSON file.

        Args:
            file_path: Path to the JSON file.

        Returns:
            The parsed JSON content.

        Raises:
            json.JSONDecodeError: If the file contains invalid JSON.
            FileNotFoundError: If the file doesn't exist.
        """
        import json

        resolved_path = self.resolve_path(file_path)
        logger.debug(f"Reading JSON file: {resolved_path}")

        with open(resolved_path, 'r') as f:
            return json.load(f)

    def write_json(self, data: Any, file_path: str, indent: int = 2) -> str:
        """
        Write data to a JSON file.

        Args:
            data: The data to write.
            file_path: Path to the output file.
            indent: Number of spaces for indentation (default: 2).

        Returns:
            The absolute path to the created file.
        """
        import json

        resolved_path = self._output_path(file_path)

        os.makedirs(os.path.dirname(resolved_path), exist_ok=True)

        with open(resolved_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)

        logger.info(f"JSON data written to {resolved_path}")
        return resolved_path
