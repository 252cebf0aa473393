"""Configuration settings for FigletKit."""

from pathlib import Path

from pydantic import BaseModel, Field

# FIGlet fonts start at the space character
FIRST_CODE_POINT = 32


class ParserConfig(BaseModel):
    """Configuration for reading and building fonts."""

    first_code_point: int = Field(
        default=FIRST_CODE_POINT,
        ge=0,
        le=0x10FFFF,
        description="Code point assigned to the first glyph block",
    )
    strict: bool = Field(
        default=False,
        description="Raise on a trailing partial glyph block instead of discarding it",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used when decoding font files",
    )
    font_suffix: str = Field(
        default=".flf",
        description="File suffix identifying FIGlet font files",
    )


class LibraryConfig(BaseModel):
    """Configuration for bulk font loading."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker threads (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FigletKitSettings(BaseModel):
    """Main application settings."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FigletKitSettings:
    """Get default application settings."""
    return FigletKitSettings()
