"""Built-in mask presets for common form fields."""

from typing import Dict, List, Optional

from inputmask.core.config import MaskConfig
from inputmask.core.exceptions import create_preset_error
from inputmask.core.preset_loader import PresetConfig
from inputmask.engine import InputMask, create_input_mask_from_pattern


DEFAULT_PRESETS: Dict[str, PresetConfig] = {
    "phone_us": PresetConfig(
        pattern="(###) ###-####", description="US phone number"
    ),
    "date_iso": PresetConfig(pattern="####-##-##", description="ISO 8601 date"),
    "date_us": PresetConfig(pattern="##/##/####", description="US date (MM/DD/YYYY)"),
    "time_24h": PresetConfig(pattern="##:##", description="24-hour clock time"),
    "credit_card": PresetConfig(
        pattern="#### #### #### ####", description="16-digit payment card number"
    ),
    "ssn": PresetConfig(pattern="###-##-####", description="US social security number"),
    "zip_plus4": PresetConfig(pattern="#####-####", description="US ZIP+4 code"),
    "ipv4_padded": PresetConfig(
        pattern="###.###.###.###", description="Zero-padded IPv4 address"
    ),
}


def list_presets(extra: Optional[Dict[str, PresetConfig]] = None) -> List[str]:
    """Names of the built-in presets plus any extra ones, sorted."""
    names = set(DEFAULT_PRESETS)
    if extra:
        names.update(extra)
    return sorted(names)


def get_preset_config(
    name: str, extra: Optional[Dict[str, PresetConfig]] = None
) -> PresetConfig:
    """Look up a preset, preferring ``extra`` over the built-ins.

    Raises:
        PresetError: If no preset has that name
    """
    if extra and name in extra:
        return extra[name]
    if name in DEFAULT_PRESETS:
        return DEFAULT_PRESETS[name]
    raise create_preset_error(
        f"Unknown preset '{name}'", preset_name=name, available=list_presets(extra)
    )


def get_preset_pattern(name: str) -> str:
    """Return the pattern string of a built-in preset."""
    return get_preset_config(name).pattern


def get_preset(
    name: str,
    extra: Optional[Dict[str, PresetConfig]] = None,
    config: Optional[MaskConfig] = None,
) -> InputMask:
    """Create an InputMask for a named preset.

    Examples:
        >>> get_preset("date_us").mask("12252024")
        '12/25/2024'
    """
    preset = get_preset_config(name, extra)
    return create_input_mask_from_pattern(
        preset.pattern,
        token_char=preset.token_char,
        escape_char=preset.escape_char,
        config=config,
    )
