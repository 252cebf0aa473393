"""Configuration management for figletkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ParserConfig: Font reading and glyph building settings
- LibraryConfig: Bulk loading settings
- LoggingConfig: Logging settings
- FigletKitSettings: Main application settings
"""

from figletkit.config.settings import (
    FIRST_CODE_POINT,
    FigletKitSettings,
    LibraryConfig,
    LoggingConfig,
    ParserConfig,
    get_default_settings,
)

__all__ = [
    "FIRST_CODE_POINT",
    "FigletKitSettings",
    "LibraryConfig",
    "LoggingConfig",
    "ParserConfig",
    "get_default_settings",
]
