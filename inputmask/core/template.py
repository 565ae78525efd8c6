"""Template parsing: markers in, annotated slots out."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence


def new_token() -> str:
    """Return a fresh placeholder token.

    The token only has to be distinguishable from literals within one mask,
    so every mask gets its own uuid-suffixed sentinel.
    """
    return f"TOKEN-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class ParsedSlot:
    """One template position.

    Attributes:
        value: Literal text, or the token itself for placeholders
        is_placeholder: Whether this slot accepts an input character
        fill_order: Zero-based index among placeholders, None for literals
    """

    value: str
    is_placeholder: bool = False
    fill_order: int | None = None


@dataclass(frozen=True)
class ParsedTemplate:
    """Immutable parse result shared by every mask call.

    ``fill_index`` maps a fill order to every slot position carrying it.
    It is a read-only view, so the template can be shared between calls.
    Under a parsed template each entry has one position, but slots built by
    hand may share an order and then all of them are listed.
    """

    slots: tuple[ParsedSlot, ...]
    token: str
    fill_index: Mapping[int, tuple[int, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.fill_index, MappingProxyType):
            object.__setattr__(self, "fill_index", MappingProxyType(dict(self.fill_index)))

    @classmethod
    def from_slots(cls, slots: Iterable[ParsedSlot], token: str) -> ParsedTemplate:
        """Build a template and its fill-order index from ready-made slots."""
        slots = tuple(slots)
        index: dict[int, list[int]] = {}
        for position, slot in enumerate(slots):
            if slot.fill_order is not None:
                index.setdefault(slot.fill_order, []).append(position)
        return cls(
            slots=slots,
            token=token,
            fill_index={order: tuple(positions) for order, positions in index.items()},
        )

    @property
    def marker_count(self) -> int:
        return len(self.slots)

    @property
    def token_count(self) -> int:
        return sum(1 for slot in self.slots if slot.is_placeholder)

    def __len__(self) -> int:
        return len(self.slots)


def parse_template(markers: Sequence[str], token: str) -> ParsedTemplate:
    """Annotate template markers with placeholder fill orders.

    Placeholders are numbered left to right starting at 0. Literals, including
    empty and multi-character ones, are kept as-is with no fill order.

    Args:
        markers: Ordered token/literal markers
        token: The marker value that designates a placeholder

    Returns:
        ParsedTemplate with one slot per marker

    Examples:
        >>> parsed = parse_template(["(", "T", "T", ")"], "T")
        >>> [slot.fill_order for slot in parsed.slots]
        [None, 0, 1, None]
    """
    order = -1
    slots: list[ParsedSlot] = []

    for marker in markers:
        if marker == token:
            order += 1
            slots.append(ParsedSlot(value=marker, is_placeholder=True, fill_order=order))
        else:
            slots.append(ParsedSlot(value=marker))

    return ParsedTemplate.from_slots(slots, token)
