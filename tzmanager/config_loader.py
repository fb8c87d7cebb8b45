"""
Configuration loader for TimeZone Manager.

Supports loading configuration from:
1. config.ini file (optional)
2. Environment variables (for scripted launches)
3. Built-in defaults
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import click

from tzmanager.models import AppConfig, DEFAULT_ZONES, ZoneEntry

logger = logging.getLogger(__name__)

APP_NAME = "TzGameLauncher"
STATE_FILE_NAME = "prev_tz.txt"
DEFAULT_TZUTIL = "tzutil.exe"


def default_state_dir() -> Path:
    """Per-user local application data directory for the saved-zone record."""
    return Path(click.get_app_dir(APP_NAME, roaming=False))


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise

        Raises:
            ValueError: If the file exists but cannot be parsed
        """
        if not os.path.exists(self.config_file):
            return False

        parser = configparser.ConfigParser()
        # Zone identifiers are case-sensitive ("GMT Standard Time")
        parser.optionxform = str
        try:
            parser.read(self.config_file, encoding='utf-8')
        except configparser.Error as e:
            raise ValueError(f"Invalid config file {self.config_file}: {e}")

        self.config = parser
        logger.debug("Loaded configuration from %s", self.config_file)
        return True

    def _setting(self, option: str, env_var: str) -> Optional[str]:
        if self.config and self.config.has_option('Settings', option):
            value = self.config.get('Settings', option).strip()
            if value:
                return value

        value = os.getenv(env_var, '').strip()
        return value or None

    def get_state_file(self) -> Path:
        """
        Get the saved-zone record path.

        Returns:
            Path of the record file inside the configured state directory
        """
        state_dir = self._setting('state_dir', 'TZMANAGER_STATE_DIR')
        base = Path(state_dir).expanduser() if state_dir else default_state_dir()
        return base / STATE_FILE_NAME

    def get_tzutil_path(self) -> str:
        """Get the name or path of the time zone utility."""
        return self._setting('tzutil_path', 'TZMANAGER_TZUTIL') or DEFAULT_TZUTIL

    def get_zones(self) -> Tuple[ZoneEntry, ...]:
        """
        Get the selectable zones.

        Returns:
            Zones from the [Zones] section in file order, or the built-in list

        Raises:
            ValueError: If a [Zones] section is present but empty
        """
        if not (self.config and self.config.has_section('Zones')):
            return DEFAULT_ZONES

        zones = tuple(
            ZoneEntry(identifier.strip(), label.strip())
            for identifier, label in self.config.items('Zones')
            if identifier.strip()
        )
        if not zones:
            raise ValueError(
                f"The [Zones] section in {self.config_file} is empty.\n"
                "Add lines like 'GMT Standard Time = London' or remove the section."
            )
        return zones

    def get_config(self) -> AppConfig:
        """Assemble the full application configuration."""
        return AppConfig(
            state_file=self.get_state_file(),
            tzutil_path=self.get_tzutil_path(),
            zones=self.get_zones(),
        )


def load_config(config_file: str = "config.ini") -> AppConfig:
    """
    Convenience function to load all configuration.

    Args:
        config_file: Path to config file

    Returns:
        AppConfig built from file, environment and defaults

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_config()
