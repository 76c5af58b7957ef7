"""
Core infrastructure for ofkt.

Provides:
- Configuration management
- Logging setup
- The alias record model
"""

from ofkt.core.config import SearchSettings, get_settings
from ofkt.core.logging import setup_logging
from ofkt.core.models import FileAlias

__all__ = [
    "SearchSettings",
    "get_settings",
    "setup_logging",
    "FileAlias",
]
