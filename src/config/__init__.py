# Configuration package initialization
"""
Quake Log Tools - Configuration System

Profile-based JSON configuration for the Quake log tools.

Quick Usage:
    from config import config

    log_file = config.get('paths.log_file')

    from config import Config
    server_config = Config(profile='ctf_server')
"""

from config.config import Config, config

__all__ = ['Config', 'config']
