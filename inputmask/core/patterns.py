"""Pattern strings as a shorthand for template functions.

A pattern such as ``"(###) ###-####"`` spells a template one character at a
time: every unescaped token character is a placeholder and everything else is
a literal. A token character can be used as a literal by escaping it, as in
``"\\##"``.
"""

from __future__ import annotations

from typing import Callable

from .exceptions import PatternError

TemplateFn = Callable[[str], list[str]]

DEFAULT_TOKEN_CHAR = "#"
DEFAULT_ESCAPE_CHAR = "\\"


def _check_single_char(name: str, value: str, pattern: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise PatternError(
            f"{name} must be a single character, got {value!r}",
            pattern=pattern,
        )


def split_pattern(
    pattern: str,
    token_char: str = DEFAULT_TOKEN_CHAR,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
) -> list[str | None]:
    """Split a pattern into markers, using ``None`` for placeholders.

    Raises:
        PatternError: On a bad token/escape character or a trailing escape
    """
    if not isinstance(pattern, str):
        raise PatternError(f"Pattern must be a string, got {type(pattern).__name__}")
    _check_single_char("token_char", token_char, pattern)
    _check_single_char("escape_char", escape_char, pattern)
    if token_char == escape_char:
        raise PatternError(
            "token_char and escape_char must differ", pattern=pattern
        )

    markers: list[str | None] = []
    escaped = False
    for position, char in enumerate(pattern):
        if escaped:
            markers.append(char)
            escaped = False
        elif char == escape_char:
            escaped = True
        elif char == token_char:
            markers.append(None)
        else:
            markers.append(char)

    if escaped:
        raise PatternError(
            "Pattern ends with a dangling escape character",
            pattern=pattern,
            position=len(pattern) - 1,
        )
    return markers


def template_from_pattern(
    pattern: str,
    token_char: str = DEFAULT_TOKEN_CHAR,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
) -> TemplateFn:
    """Turn a pattern string into a template function.

    The pattern is validated immediately, so a malformed pattern fails here
    rather than when the mask is created.

    Examples:
        >>> fn = template_from_pattern("##/##")
        >>> fn("T")
        ['T', 'T', '/', 'T', 'T']
    """
    markers = split_pattern(pattern, token_char, escape_char)

    def template_fn(token: str) -> list[str]:
        return [token if marker is None else marker for marker in markers]

    return template_fn
