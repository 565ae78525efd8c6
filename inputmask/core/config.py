"""Runtime configuration from environment variables.

This module provides centralized configuration for inputmask through
environment variables. It controls how placeholders are located during a
render pass, how strictly template markers are checked, and whether input
overflow is logged.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class MaskConfig:
    """Runtime mask configuration.

    Attributes:
        use_fill_index: Locate placeholder slots through the precomputed
            fill-order index instead of scanning every slot per character
        strict_markers: Reject non-string template markers instead of
            coercing them with ``str()``
        log_overflow: Emit a debug record when input exceeds the placeholders
    """

    use_fill_index: bool = True
    strict_markers: bool = True
    log_overflow: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.use_fill_index = self._validate_flag("use_fill_index", self.use_fill_index, True)
        self.strict_markers = self._validate_flag("strict_markers", self.strict_markers, True)
        self.log_overflow = self._validate_flag("log_overflow", self.log_overflow, False)

        logger.debug(
            f"MaskConfig initialized: use_fill_index={self.use_fill_index}, "
            f"strict_markers={self.strict_markers}, log_overflow={self.log_overflow}"
        )

    @staticmethod
    def _validate_flag(name: str, value: Any, default: bool) -> bool:
        if isinstance(value, bool):
            return value
        logger.warning(f"{name} must be a boolean, got {value!r}, using {default}")
        return default

    @classmethod
    def from_environment(cls) -> "MaskConfig":
        """Load configuration from environment variables.

        Environment Variables:
            INPUTMASK_USE_FILL_INDEX: Use the fill-order index (true|false)
            INPUTMASK_STRICT_MARKERS: Reject non-string markers (true|false)
            INPUTMASK_LOG_OVERFLOW: Log overflowing input (true|false)

        Returns:
            MaskConfig instance with values from environment or defaults
        """
        config = cls(
            use_fill_index=cls._get_env_bool("INPUTMASK_USE_FILL_INDEX", True),
            strict_markers=cls._get_env_bool("INPUTMASK_STRICT_MARKERS", True),
            log_overflow=cls._get_env_bool("INPUTMASK_LOG_OVERFLOW", False),
        )
        logger.info(f"Loaded configuration from environment: {config}")
        return config

    @staticmethod
    def _get_env_bool(key: str, default: bool) -> bool:
        """Get boolean value from environment with default fallback.

        Only 'true' and 'false' (case insensitive) are recognized; anything
        else falls back to the default.
        """
        value = os.getenv(key)
        if value is None:
            return default

        cleaned_value = value.strip().lower()
        if cleaned_value == "true":
            return True
        elif cleaned_value == "false":
            return False
        else:
            logger.warning(
                f"Environment variable {key}={value} is not 'true' or 'false', "
                f"using default {default}"
            )
            return default

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "use_fill_index": self.use_fill_index,
            "strict_markers": self.strict_markers,
            "log_overflow": self.log_overflow,
        }

    def __repr__(self) -> str:
        return (
            f"MaskConfig(use_fill_index={self.use_fill_index}, "
            f"strict_markers={self.strict_markers}, "
            f"log_overflow={self.log_overflow})"
        )


# Loaded lazily so tests can patch the environment first
_mask_config: Optional[MaskConfig] = None


def get_config() -> MaskConfig:
    """Get the global mask configuration, creating it if needed."""
    global _mask_config
    if _mask_config is None:
        _mask_config = MaskConfig.from_environment()
    return _mask_config


def reset_config() -> None:
    """Reset the global configuration for testing purposes."""
    global _mask_config
    _mask_config = None
