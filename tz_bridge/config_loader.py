"""
Configuration loader for TZ Bridge.

Supports loading configuration from:
1. config.ini file (recommended)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from typing import Optional

from tz_bridge.models import BridgeSettings, DEFAULT_CHANNEL_NAME
from tz_bridge.timezone_utils import STRATEGIES


def _parse_strategies(raw: str) -> tuple[str, ...]:
    """Split a comma separated strategy list and check every name."""
    names = tuple(part.strip() for part in raw.split(',') if part.strip())
    if not names:
        raise ValueError("At least one timezone strategy must be configured.")
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown:
        raise ValueError(
            f"Unknown timezone strategies: {', '.join(unknown)}.\n"
            f"Valid strategies are: {', '.join(STRATEGIES)}"
        )
    return names


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Port must be a number, got '{raw}'")
    if port < 1 or port > 65535:
        raise ValueError(f"Port must be between 1 and 65535, got {port}")
    return port


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config: Optional[configparser.ConfigParser] = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_settings(self) -> BridgeSettings:
        """
        Get bridge settings.

        Returns:
            BridgeSettings with configured values

        Raises:
            ValueError: If a configured value is invalid
        """
        settings = BridgeSettings()

        # Try config file first
        if self.config and self.config.has_section('Bridge'):
            settings.channel_name = self.config.get('Bridge', 'channel_name', fallback=DEFAULT_CHANNEL_NAME)
            settings.strategies = _parse_strategies(
                self.config.get('Bridge', 'strategies', fallback=','.join(settings.strategies))
            )
            settings.host = self.config.get('Bridge', 'host', fallback=settings.host)
            settings.port = _parse_port(self.config.get('Bridge', 'port', fallback=str(settings.port)))
            return settings

        # Try environment variables
        settings.channel_name = os.getenv('TZ_BRIDGE_CHANNEL', DEFAULT_CHANNEL_NAME)
        settings.strategies = _parse_strategies(os.getenv('TZ_BRIDGE_STRATEGIES', ','.join(settings.strategies)))
        settings.host = os.getenv('TZ_BRIDGE_HOST', settings.host)
        settings.port = _parse_port(os.getenv('TZ_BRIDGE_PORT', str(settings.port)))

        return settings


def load_config(config_file: str = "config.ini") -> BridgeSettings:
    """
    Convenience function to load all configuration.

    Args:
        config_file: Path to config file

    Returns:
        BridgeSettings

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_settings()
