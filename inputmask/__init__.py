"""inputmask: reversible input masking for text fields.

A template mixes literal characters with fillable positions. ``mask`` formats
raw keystrokes into the template and ``unmask`` recovers the raw value after
each single-character edit of the masked text.
"""

__version__ = "0.1.0"

from .builder import InputMaskBuilder
from .core import (
    ConfigurationError,
    InputMaskError,
    MaskConfig,
    MaskManager,
    ParsedSlot,
    ParsedTemplate,
    PatternError,
    PresetConfig,
    PresetError,
    PresetLoader,
    TemplateError,
    parse_template,
    template_from_pattern,
)
from .defaults import DEFAULT_PRESETS, get_preset, get_preset_pattern, list_presets
from .engine import InputMask, create_input_mask, create_input_mask_from_pattern
from .wrappers import MaskedField

__all__ = [
    "__version__",
    # Main API
    "InputMask",
    "create_input_mask",
    "create_input_mask_from_pattern",
    "InputMaskBuilder",
    "MaskedField",
    # Presets
    "DEFAULT_PRESETS",
    "get_preset",
    "get_preset_pattern",
    "list_presets",
    "PresetConfig",
    "PresetLoader",
    # Core
    "MaskConfig",
    "MaskManager",
    "ParsedSlot",
    "ParsedTemplate",
    "parse_template",
    "template_from_pattern",
    # Exceptions
    "InputMaskError",
    "TemplateError",
    "PatternError",
    "PresetError",
    "ConfigurationError",
]
