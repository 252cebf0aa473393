"""Utility functions for figletkit.

This module provides utility functions including:

- Logging setup and configuration
- Bulk load statistics
"""

from figletkit.utils.logging import (
    LoadLogger,
    LoadStats,
    configure_logging,
    reset_logging,
)

__all__ = [
    "LoadLogger",
    "LoadStats",
    "configure_logging",
    "reset_logging",
]
