"""
Profile Configuration for Quake Log Tools

A small JSON configuration reader providing:
- Profile-based settings (profiles/<profile>.json)
- Profile secrets merged on top (secrets/<profile>_secrets.json)
- Dot-notation access to nested values

Usage:
    from config import config
    log_file = config.get('paths.log_file')

    from config import Config
    server_config = Config(profile='ctf_server')

Recognized keys:
    general.log_level          Logging level name (default INFO)
    general.output_path        Directory for reports (default output)
    paths.log_file             games.log used when no log is given
    log_source.timeout         HTTP timeout in seconds for URL logs
    log_source.ssl_verify      Verify TLS certificates for URL logs
    report.indent              JSON report indentation
"""

from typing import Dict, Any, List, Optional
from pathlib import Path

from quake_log_tools.base import JSONTool, logger


class Config(JSONTool):
    """
    JSON configuration reader with profiles and secrets.

    Attributes:
        config_dir (str): Directory containing profile JSON files
        secrets_dir (str): Directory containing secrets JSON files
        profile (str): Currently active profile name
        data (dict): Loaded configuration data
    """

    DEFAULT_CONFIG_DIR = str(Path(__file__).parent / 'profiles')
    DEFAULT_SECRETS_DIR = str(Path(__file__).parent / 'secrets')
    DEFAULT_PROFILE = "default"

    def __init__(self, config_dir: str = None, secrets_dir: str = None, profile: str = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Config instance and load the profile.

        Args:
            config_dir (str, optional): Directory for config profiles.
            secrets_dir (str, optional): Directory for secrets files.
            profile (str, optional): Profile name to use. Defaults to 'default'.
            config (dict, optional): Base configuration dictionary for JSONTool compatibility.
        """
        super().__init__(config)

        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self.secrets_dir = secrets_dir or self.DEFAULT_SECRETS_DIR
        self.profile = profile or self.DEFAULT_PROFILE
        self.data = {}

        Path(self.config_dir).mkdir(parents=True, exist_ok=True)
        Path(self.secrets_dir).mkdir(parents=True, exist_ok=True)

        self._load()

    def run(self) -> Dict[str, Any]:
        """Return the full configuration."""
        return self.get_full_config()

    def _load(self):
        """
        Load the profile JSON file and merge its secrets.

        A missing default profile is created empty; a missing named profile
        leaves the configuration empty.
        """
        profile_path = Path(self.config_dir) / f"{self.profile}.json"

        if not profile_path.exists():
            if self.profile == self.DEFAULT_PROFILE:
                self._create_default_profile(str(profile_path))
            else:
                logger.warning(f"Profile '{self.profile}' not found. Using empty configuration.")
                self.data = {}
            return

        try:
            self.data = self.read_json(str(profile_path))
            logger.info(f"Loaded configuration from '{self.profile}'")
            self._load_secrets()
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            self.data = {}

    def _create_default_profile(self, profile_path: str):
        """Create an empty default profile file."""
        default_config = {}
        try:
            self.write_json(default_config, profile_path)
            logger.info(f"Created default profile at '{profile_path}'")
            self.data = default_config
        except Exception as e:
            logger.error(f"Error creating default configuration: {e}")
            self.data = {}

    def _load_secrets(self):
        """Deep-merge '<profile>_secrets.json' over the loaded profile, if present."""
        profile_secrets_path = Path(self.secrets_dir) / f"{self.profile}_secrets.json"
        if not profile_secrets_path.exists():
            logger.debug(f"No secrets file found for profile '{self.profile}'")
            return

        try:
            profile_secrets = self.read_json(str(profile_secrets_path))
            if isinstance(profile_secrets, dict):
                self._deep_merge(self.data, profile_secrets)
                logger.info(f"Loaded and merged secrets from '{profile_secrets_path}'")
        except Exception as e:
            logger.error(f"Error loading profile-specific secrets: {e}")

    def _deep_merge(self, target: Dict[str, Any], source: Dict[str, Any]):
        """Recursively merge source into target; non-dict values replace."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)
            else:
                target[key] = value

    def get(self, path: str = None, default: Any = None) -> Any:
        """
        Get a configuration value by path using dot notation.

        Args:
            path (str, optional): Dot notation path, e.g. "paths.log_file".
                If None, returns the entire configuration dictionary.
            default (Any, optional): Value to return if path not found.

        Returns:
            Any: The configuration value, or default if not found.

        Examples:
            >>> config.get('report.indent', 2)
            2
        """
        if path is None:
            return self.data

        current = self.data
        if path:
            for key in path.split('.'):
                if isinstance(current, dict) and key in current:
                    current = current[key]
                else:
                    return default

        return current

    def list_profiles(self) -> List[str]:
        """List the available profile names."""
        config_path = Path(self.config_dir)
        return [f.stem for f in config_path.glob("*.json")]

    def switch_profile(self, profile: str) -> bool:
        """
        Switch to a different profile and reload.

        Args:
            profile (str): Name of the profile (without .json extension).

        Returns:
            bool: True if successful, False if profile not found.
        """
        profile_path = Path(self.config_dir) / f"{profile}.json"
        if profile_path.exists():
            self.profile = profile
            self._load()
            return True

        logger.warning(f"Profile '{profile}' not found.")
        return False

    def get_full_config(self) -> Dict[str, Any]:
        """Return the full configuration dictionary."""
        return self.data


# Global singleton instance: from config import config
config = Config()
