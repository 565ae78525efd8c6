"""Builder pattern for assembling mask templates piece by piece."""

from __future__ import annotations

from inputmask.core.config import MaskConfig
from inputmask.core.exceptions import TemplateError
from inputmask.core.patterns import DEFAULT_ESCAPE_CHAR, DEFAULT_TOKEN_CHAR, split_pattern
from inputmask.engine import InputMask, create_input_mask


class InputMaskBuilder:
    """Fluent builder for InputMask templates.

    The builder records a plan of literals and placeholders and only produces
    the template function when :meth:`build` is called.

    Examples:
        # US phone number
        phone = (
            InputMaskBuilder()
            .literal("(")
            .placeholder(3)
            .literal(") ")
            .placeholder(3)
            .literal("-")
            .placeholder(4)
            .build()
        )

        # Mixing in a pattern
        card = InputMaskBuilder().pattern("#### #### #### ####").build()
    """

    def __init__(self) -> None:
        """Initialize builder with an empty plan."""
        # None marks a placeholder
        self._plan: list[str | None] = []
        self._config: MaskConfig | None = None

    def literal(self, text: str) -> InputMaskBuilder:
        """Append fixed text.

        Args:
            text: Literal text, rendered as a single marker

        Returns:
            Self for method chaining

        Raises:
            TemplateError: If text is not a string
        """
        if not isinstance(text, str):
            raise TemplateError(
                f"Literal must be a string, got {type(text).__name__}",
                actual_value=text,
            )
        self._plan.append(text)
        return self

    def placeholder(self, count: int = 1) -> InputMaskBuilder:
        """Append ``count`` fillable positions.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError("Placeholder count must not be negative")
        self._plan.extend([None] * count)
        return self

    def pattern(
        self,
        pattern: str,
        token_char: str = DEFAULT_TOKEN_CHAR,
        escape_char: str = DEFAULT_ESCAPE_CHAR,
    ) -> InputMaskBuilder:
        """Append the markers spelled by a pattern string."""
        self._plan.extend(split_pattern(pattern, token_char, escape_char))
        return self

    def with_config(self, config: MaskConfig) -> InputMaskBuilder:
        """Use a specific configuration instead of the global one."""
        self._config = config
        return self

    def build(self) -> InputMask:
        """Create the InputMask described by the plan so far."""
        plan = list(self._plan)

        def template_fn(token: str) -> list[str]:
            return [token if marker is None else marker for marker in plan]

        return create_input_mask(template_fn, config=self._config)

    def __repr__(self) -> str:
        placeholders = sum(1 for marker in self._plan if marker is None)
        return f"InputMaskBuilder(markers={len(self._plan)}, placeholders={placeholders})"
