"""Structured logging setup."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from inputmask.core.exceptions import ConfigurationError

from .config import LoggingConfig, load_logging_config


def add_timestamp(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_level(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def _build_handler(config: LoggingConfig) -> logging.Handler:
    if config.output == "file":
        if not config.file_path:
            raise ConfigurationError(
                "file_path (INPUTMASK_LOG_FILE) is required when logging output is 'file'",
                config_key="INPUTMASK_LOG_FILE",
                recovery_suggestions=["Set INPUTMASK_LOG_FILE or choose stdout/stderr output"],
            )
        return logging.FileHandler(config.file_path)
    return logging.StreamHandler(sys.stdout if config.output == "stdout" else sys.stderr)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog and route standard library logging through it.

    Library modules log with ``logging.getLogger(__name__)``; records from
    both structlog and the standard library end up with the same renderer.
    """
    if config is None:
        config = load_logging_config()

    shared_processors: list[Any] = [
        structlog.stdlib.add_logger_name,
        add_level,
        add_timestamp,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Any
    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = _build_handler(config)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.level, logging.WARNING))


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
