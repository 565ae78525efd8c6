"""Preset loading from YAML files with inheritance support."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import PatternError, PresetError
from .patterns import DEFAULT_ESCAPE_CHAR, DEFAULT_TOKEN_CHAR, split_pattern

logger = logging.getLogger(__name__)


@dataclass
class PresetLoadContext:
    """Context for loading preset files, tracks the inheritance chain."""

    current_file: Path
    inheritance_chain: list[Path]

    def derive_path(self, relative_path: str) -> Path:
        """Resolve relative path from current preset file location."""
        if Path(relative_path).is_absolute():
            return Path(relative_path)
        return (self.current_file.parent / relative_path).resolve()


class PresetConfig(BaseModel):
    """A named pattern and the characters used to read it."""

    pattern: str = Field(..., description="Pattern string, e.g. '(###) ###-####'")
    token_char: str = Field(default=DEFAULT_TOKEN_CHAR, description="Placeholder character")
    escape_char: str = Field(default=DEFAULT_ESCAPE_CHAR, description="Escape character")
    description: Optional[str] = Field(default=None, description="Human-readable summary")

    @field_validator("token_char", "escape_char")
    @classmethod
    def validate_single_char(cls, v: Any) -> Any:
        """Token and escape characters are single characters."""
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError(f"Expected a single character, got {v!r}")
        return v

    def check_pattern(self) -> None:
        """Raise PatternError if the pattern cannot be split."""
        split_pattern(self.pattern, self.token_char, self.escape_char)


class PresetFileSchema(BaseModel):
    """Pydantic model for a preset YAML file."""

    extends: Optional[Union[str, list[str]]] = Field(
        default=None, description="Preset file(s) to inherit from"
    )
    presets: dict[str, PresetConfig] = Field(default_factory=dict)

    @field_validator("presets", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        """Allow ``name: "<pattern>"`` as shorthand for ``name: {pattern: ...}``."""
        if not isinstance(v, dict):
            return v
        return {
            name: {"pattern": entry} if isinstance(entry, str) else entry
            for name, entry in v.items()
        }


class PresetLoader:
    """
    Loads named mask presets from YAML files.

    A preset file looks like::

        extends: base_presets.yaml
        presets:
          phone_de: "+49 ### #######"
          order_id:
            pattern: "ORD-****"
            token_char: "*"
            description: Internal order number

    Presets from inherited files are loaded first; later files override
    earlier ones by name.
    """

    def __init__(self, base_path: Optional[Path] = None):
        """
        Initialize preset loader.

        Args:
            base_path: Base directory for resolving relative preset paths
        """
        self.base_path = base_path or Path.cwd()
        self._file_cache: dict[Path, dict[str, PresetConfig]] = {}

    def load_presets(self, preset_path: Union[str, Path]) -> dict[str, PresetConfig]:
        """
        Load presets from a file with inheritance resolved.

        Raises:
            PresetError: If the file is missing, malformed, or inherits circularly
        """
        preset_path = Path(preset_path)
        if not preset_path.is_absolute():
            preset_path = self.base_path / preset_path

        context = PresetLoadContext(current_file=preset_path, inheritance_chain=[])
        return self._load_preset_file(preset_path, context)

    def _load_preset_file(
        self, preset_path: Path, context: PresetLoadContext
    ) -> dict[str, PresetConfig]:
        resolved_path = preset_path.resolve()
        resolved_chain = [p.resolve() for p in context.inheritance_chain]

        if resolved_path in resolved_chain:
            chain_str = " -> ".join(
                str(p) for p in context.inheritance_chain + [preset_path]
            )
            raise PresetError(
                f"Circular inheritance detected: {chain_str}",
                preset_file=str(preset_path),
            )

        if resolved_path in self._file_cache:
            return dict(self._file_cache[resolved_path])

        if not preset_path.exists():
            raise PresetError(
                f"Preset file not found: {preset_path}", preset_file=str(preset_path)
            )

        try:
            with open(preset_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PresetError(
                f"Invalid YAML in {preset_path}: {e}", preset_file=str(preset_path)
            ) from e

        if not isinstance(data, dict):
            raise PresetError(
                f"Preset file {preset_path} must contain a mapping",
                preset_file=str(preset_path),
            )

        try:
            schema = PresetFileSchema(**data)
        except ValidationError as e:
            raise PresetError(
                f"Schema validation failed for {preset_path}: {e}",
                preset_file=str(preset_path),
            ) from e

        for name, preset in schema.presets.items():
            try:
                preset.check_pattern()
            except PatternError as e:
                raise PresetError(
                    f"Preset '{name}' in {preset_path} has an invalid pattern: {e.message}",
                    preset_name=name,
                    preset_file=str(preset_path),
                ) from e

        presets: dict[str, PresetConfig] = {}
        if schema.extends:
            new_context = PresetLoadContext(
                current_file=preset_path,
                inheritance_chain=context.inheritance_chain + [preset_path],
            )
            extends_list = (
                schema.extends if isinstance(schema.extends, list) else [schema.extends]
            )
            for base_path_str in extends_list:
                base_path = new_context.derive_path(base_path_str)
                presets.update(self._load_preset_file(base_path, new_context))

        presets.update(schema.presets)
        logger.debug(f"Loaded {len(presets)} presets from {preset_path}")

        self._file_cache[resolved_path] = presets
        return dict(presets)

    def validate_preset_file(self, preset_path: Union[str, Path]) -> list[str]:
        """
        Validate a preset file and return any validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        try:
            self.load_presets(preset_path)
            return []
        except PresetError as e:
            return [e.message]
