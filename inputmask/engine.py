"""InputMask - format raw keystrokes into a template and recover them again."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable

from inputmask.core.config import MaskConfig, get_config
from inputmask.core.exceptions import TemplateError, create_template_error
from inputmask.core.manager import MaskManager
from inputmask.core.patterns import (
    DEFAULT_ESCAPE_CHAR,
    DEFAULT_TOKEN_CHAR,
    template_from_pattern,
)
from inputmask.core.template import ParsedTemplate, new_token, parse_template

logger = logging.getLogger(__name__)


class InputMask:
    """Reversible mask over a static template.

    ``mask`` turns raw input into its templated form. ``unmask`` works out
    which single keystroke turned the previous masked value into the new one
    and applies it to the previous raw value. Neither operation raises: a
    non-string argument yields ``None``.

    Examples:
        >>> phone = create_input_mask(
        ...     lambda t: ["(", t, t, t, ")", " ", t, t, t, "-", t, t, t, t]
        ... )
        >>> phone.mask("5551234567")
        '(555) 123-4567'
        >>> phone.unmask("555", "(555) 1")
        '5551'
    """

    def __init__(
        self,
        template: Sequence[str],
        token: str,
        config: MaskConfig | None = None,
    ) -> None:
        """Initialize from an already-produced template.

        Most callers want :func:`create_input_mask`, which calls the template
        function and validates what it returns.

        Args:
            template: Ordered token/literal markers
            token: The marker value designating a placeholder
            config: Mask configuration (global configuration if None)
        """
        self._config = config or get_config()
        self._template = tuple(template)
        self._token = token
        self._parsed = parse_template(self._template, token)
        self._token_count = self._parsed.token_count

        logger.debug(
            f"InputMask initialized with {self.marker_count} markers, "
            f"{self._token_count} placeholders"
        )

    @property
    def template(self) -> tuple[str, ...]:
        return self._template

    @property
    def parsed_template(self) -> ParsedTemplate:
        return self._parsed

    @property
    def token_count(self) -> int:
        """Number of placeholder positions."""
        return self._token_count

    @property
    def marker_count(self) -> int:
        """Number of template markers, literals included."""
        return self._parsed.marker_count

    @property
    def config(self) -> MaskConfig:
        return self._config

    def _fill(self, value: str) -> MaskManager:
        """Fresh manager with the i-th character of ``value`` pushed at order i."""
        manager = MaskManager(self._parsed, use_fill_index=self._config.use_fill_index)
        for order, character in enumerate(value):
            manager.push(character, order)
        return manager

    def _render(self, value: Any) -> str | None:
        """Render ``value`` into the template without the length cap."""
        if not isinstance(value, str):
            return None
        return self._fill(value).join()

    def mask(self, value: str | None = None) -> str | None:
        """Format raw input into the template.

        The i-th input character fills the placeholder with fill order i;
        characters beyond the last placeholder are dropped. Untouched trailing
        slots are not rendered.

        Args:
            value: Raw input

        Returns:
            Masked string, or None if ``value`` is not a string
        """
        rendered = self._render(value)
        if rendered is None:
            return None

        if len(value) <= self.marker_count:
            return rendered

        if self._config.log_overflow:
            logger.debug(
                f"Input of {len(value)} characters overflows "
                f"{self._token_count} placeholders, capping at {self.marker_count}"
            )
        return rendered[: self.marker_count]

    @staticmethod
    def _diff(reference: str, masked_value: str) -> str | None:
        """First character of ``masked_value`` that differs from ``reference``."""
        for index, character in enumerate(masked_value):
            previous = reference[index] if index < len(reference) else None
            if previous != character:
                return character
        return None

    def _next_prefix(self, prev_value: str) -> str:
        """Masked text that precedes the next placeholder after ``prev_value``.

        This is ``mask(prev_value)`` followed by the literals the template
        renders once one more character is typed. At full capacity it is
        just ``mask(prev_value)``.
        """
        manager = self._fill(prev_value)
        manager.push(self._token, len(prev_value))
        rendered = manager.join()
        if self._token in rendered:
            return rendered[: rendered.index(self._token)]
        return rendered

    def _infer_raw(self, prev_value: Any, masked_value: Any) -> str | None:
        if not isinstance(masked_value, str) or not isinstance(prev_value, str):
            return None

        prev_masked = self._render(prev_value)
        if not isinstance(prev_masked, str):
            return None

        if len(prev_masked) == len(masked_value):
            # Same-length edits are not resolved
            return prev_value

        if len(prev_masked) < len(masked_value):
            # Literals revealed by the keystroke are skipped before diffing;
            # a value that only adds literals falls back to the plain diff.
            typed = self._diff(self._next_prefix(prev_value), masked_value)
            if typed is None:
                typed = self._diff(prev_masked, masked_value)
            if typed is None:
                return None
            return prev_value + typed

        return prev_value[:-1]

    def unmask(
        self, prev_value: str | None = None, masked_value: str | None = None
    ) -> str | None:
        """Recover the raw value after a single edit to the masked field.

        A longer masked value means one character was typed. The typed
        character is the first one that diverges from ``mask(prev_value)``
        once the literals leading up to the next placeholder are appended
        to it. A shorter masked value means the last raw character was deleted.
        A masked value of the same length leaves ``prev_value`` unchanged.

        Args:
            prev_value: Raw value held before the edit
            masked_value: Masked value the control displays after the edit

        Returns:
            New raw value of at most ``token_count`` characters, or None if
            either argument is not a string
        """
        raw = self._infer_raw(prev_value, masked_value)
        if raw is None:
            return None

        # Capped whether the excess comes from masked_value or prev_value
        return raw[: self._token_count]

    def __repr__(self) -> str:
        return (
            f"InputMask(markers={self.marker_count}, "
            f"placeholders={self._token_count})"
        )


def _collect_markers(markers: Any, config: MaskConfig) -> list[str]:
    if isinstance(markers, (str, bytes)) or not isinstance(markers, Sequence):
        raise TemplateError(
            "Template function must return a sequence of markers, "
            f"got {type(markers).__name__}",
            actual_value=markers,
        )

    collected: list[str] = []
    for index, marker in enumerate(markers):
        if isinstance(marker, str):
            collected.append(marker)
            continue
        if config.strict_markers:
            raise create_template_error(
                f"Template marker at index {index} is not a string",
                marker_index=index,
                actual=marker,
            )
        logger.warning(f"Coercing non-string template marker {marker!r} at index {index}")
        collected.append(str(marker))
    return collected


def create_input_mask(
    template_fn: Callable[[str], Sequence[str]],
    config: MaskConfig | None = None,
) -> InputMask:
    """Create a mask from a template function.

    ``template_fn`` is called once, right away, with an opaque token. It must
    return the template as an ordered sequence mixing that token (fillable
    positions) with literal strings.

    Args:
        template_fn: Callable building the template around the given token
        config: Mask configuration (global configuration if None)

    Returns:
        InputMask bound to the produced template

    Raises:
        TemplateError: If the template function returns unusable markers
    """
    config = config or get_config()
    token = new_token()
    markers = _collect_markers(template_fn(token), config)
    return InputMask(markers, token, config=config)


def create_input_mask_from_pattern(
    pattern: str,
    token_char: str = DEFAULT_TOKEN_CHAR,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    config: MaskConfig | None = None,
) -> InputMask:
    """Create a mask from a pattern string such as ``"(###) ###-####"``."""
    return create_input_mask(
        template_from_pattern(pattern, token_char=token_char, escape_char=escape_char),
        config=config,
    )
