"""Logging utilities for Logotyper."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class EditStats:
    """Statistics from an editing session."""

    applied_count: int = 0
    noop_count: int = 0
    drag_count: int = 0
    cancelled_drags: int = 0
    operations: Counter[str] = field(default_factory=Counter)

    @property
    def total_count(self) -> int:
        """Total number of operations requested."""
        return self.applied_count + self.noop_count


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
        quiet: If True, suppress console output

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

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("logotyper")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EditLogger:
    """Logger for tracking editing operations and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EditStats()

    def log_applied(self, operation: str, **details: object) -> None:
        """Log an operation that changed the composition."""
        self._logger.debug("Operation applied", operation=operation, **details)
        self._stats.applied_count += 1
        self._stats.operations[operation] += 1

    def log_noop(self, operation: str, **details: object) -> None:
        """Log an operation that left the composition unchanged."""
        self._logger.debug("Operation ignored", operation=operation, **details)
        self._stats.noop_count += 1

    def log_drag_start(self, state: str) -> None:
        """Log the start of a drag session."""
        self._logger.debug("Drag started", state=state)
        self._stats.drag_count += 1

    def log_drag_end(self, state: str, cancelled: bool) -> None:
        """Log the end of a drag session."""
        self._logger.debug("Drag ended", state=state, cancelled=cancelled)
        if cancelled:
            self._stats.cancelled_drags += 1

    def log_text_rebuilt(self, text: str, character_count: int) -> None:
        """Log a rebuild of the character sequence."""
        self._logger.info(
            "Characters rebuilt",
            text=text,
            characters=character_count,
        )

    @property
    def stats(self) -> EditStats:
        """Get current editing statistics."""
        return self._stats
