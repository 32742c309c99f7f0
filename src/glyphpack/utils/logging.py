"""Logging utilities for Glyphpack."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added to the root logger by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class PackStats:
    """Statistics from a generation run."""

    rendered_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    icon_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_icon_time_ms(self) -> float | None:
        """Average render-and-write time per icon."""
        if not self.icon_timings_ms:
            return None
        return sum(self.icon_timings_ms) / len(self.icon_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
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

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("glyphpack")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PackLogger:
    """Logger for tracking per-icon progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PackStats()

    def log_icon_start(self, label: str, slug: str) -> None:
        """Log start of icon rendering."""
        self._logger.debug("Rendering icon", icon=label, slug=slug)

    def log_icon_complete(self, label: str, slug: str, duration_ms: float) -> None:
        """Log a rendered and written icon."""
        self._logger.debug(
            "Icon rendered",
            icon=label,
            slug=slug,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.icon_timings_ms.append(duration_ms)

    def log_icon_skipped(self, label: str, reason: str) -> None:
        """Log skipped icon."""
        self._logger.warning("Icon skipped", icon=label, reason=reason)
        self._stats.skipped_count += 1

    def log_icon_error(
        self,
        label: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log icon rendering error."""
        self._logger.error(
            "Icon rendering failed",
            icon=label,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((label, str(error)))

    @property
    def stats(self) -> PackStats:
        """Get current run statistics."""
        return self._stats
