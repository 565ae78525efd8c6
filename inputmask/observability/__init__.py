"""inputmask logging setup."""

from .config import LoggingConfig, load_logging_config
from .logging import configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "load_logging_config",
    "configure_logging",
    "get_logger",
]
