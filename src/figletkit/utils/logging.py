"""Logging utilities for FigletKit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on each call
_handlers: list[logging.Handler] = []


@dataclass
class LoadStats:
    """Statistics from a bulk font load."""

    loaded_count: int = 0
    skipped_count: int = 0
    glyph_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate load duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and optionally a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _handlers.append(console_handler)

    for handler in _handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("figletkit")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging and restore structlog defaults."""
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    structlog.reset_defaults()


class LoadLogger:
    """Logger for tracking bulk font loading."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LoadStats()

    def log_font_loaded(self, source: str, glyph_count: int) -> None:
        """Log a successfully loaded font."""
        self._logger.debug("Font loaded", source=source, glyphs=glyph_count)
        self._stats.loaded_count += 1
        self._stats.glyph_count += glyph_count

    def log_font_skipped(self, source: str, error: Exception) -> None:
        """Log a font that could not be loaded."""
        self._logger.warning(
            "Font skipped",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.skipped_count += 1
        self._stats.errors.append((source, str(error)))

    def log_summary(self, directory: str) -> None:
        """Log totals for a finished load."""
        self._logger.info(
            "Fonts loaded",
            directory=directory,
            loaded=self._stats.loaded_count,
            skipped=self._stats.skipped_count,
            glyphs=self._stats.glyph_count,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    @property
    def stats(self) -> LoadStats:
        """Get current load statistics."""
        return self._stats
