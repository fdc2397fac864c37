"""Logging utilities for Smoothstroke."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_handlers: list[logging.Handler] = []


@dataclass
class StrokeStats:
    """Statistics from processing one stroke."""

    points_fed: int = 0
    points_accepted: int = 0
    points_rejected: int = 0
    segments_fitted: int = 0
    stamps_emitted: int = 0
    stamps_suppressed: int = 0

    @property
    def acceptance_rate(self) -> float:
        """Fraction of fed points that made it into the sliding window."""
        if self.points_fed == 0:
            return 0.0
        return self.points_accepted / self.points_fed


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

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
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _handlers.append(console_handler)

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

    logger = structlog.get_logger("smoothstroke")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class StrokeLogger:
    """Logger for tracking replayed strokes and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._strokes: list[StrokeStats] = []

    def log_stroke_loaded(self, path: str, point_count: int, duration_ms: int) -> None:
        """Log a stroke read from disk."""
        self._logger.info(
            "Stroke loaded",
            path=path,
            points=point_count,
            duration_ms=duration_ms,
        )

    def log_stroke_complete(self, stats: StrokeStats, duration_ms: float) -> None:
        """Log a fully processed stroke."""
        self._logger.info(
            "Stroke processed",
            fed=stats.points_fed,
            accepted=stats.points_accepted,
            rejected=stats.points_rejected,
            stamps=stats.stamps_emitted,
            suppressed=stats.stamps_suppressed,
            duration_ms=round(duration_ms, 2),
        )
        self._strokes.append(stats)

    def log_stroke_error(self, path: str, error: Exception) -> None:
        """Log a stroke that could not be processed."""
        self._logger.error(
            "Stroke processing failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def strokes(self) -> list[StrokeStats]:
        """Statistics of every stroke logged so far."""
        return list(self._strokes)
