"""Core template parsing and rendering for inputmask."""

from .config import MaskConfig, get_config, reset_config
from .exceptions import (
    ConfigurationError,
    InputMaskError,
    PatternError,
    PresetError,
    TemplateError,
)
from .manager import MaskManager
from .patterns import split_pattern, template_from_pattern
from .preset_loader import PresetConfig, PresetLoader
from .template import ParsedSlot, ParsedTemplate, new_token, parse_template

__all__ = [
    # Configuration
    "MaskConfig",
    "get_config",
    "reset_config",
    # Exceptions
    "InputMaskError",
    "TemplateError",
    "PatternError",
    "PresetError",
    "ConfigurationError",
    # Templates
    "ParsedSlot",
    "ParsedTemplate",
    "new_token",
    "parse_template",
    "MaskManager",
    # Patterns and presets
    "split_pattern",
    "template_from_pattern",
    "PresetConfig",
    "PresetLoader",
]
