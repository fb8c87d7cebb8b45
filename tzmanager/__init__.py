"""
TimeZone Manager

Pick a Windows time zone from a short list and restore the original one later.
"""

from tzmanager.config_loader import load_config
from tzmanager.controller import SessionController
from tzmanager.models import AppConfig, DEFAULT_ZONES, TzUtilResult, ZoneEntry
from tzmanager.state import SavedZoneStore
from tzmanager.tzutil_client import TzUtilClient

__version__ = "0.1.0"
__all__ = [
    "AppConfig",
    "DEFAULT_ZONES",
    "SavedZoneStore",
    "SessionController",
    "TzUtilClient",
    "TzUtilResult",
    "ZoneEntry",
    "load_config",
]
