"""Per-call accumulator that stamps characters into a parsed template."""

from __future__ import annotations

from .template import ParsedTemplate


class MaskManager:
    """Working copy of a parsed template for a single render pass.

    A manager is created for one ``mask`` call, fed characters with
    :meth:`push`, rendered with :meth:`join` and then discarded. It never
    modifies the :class:`ParsedTemplate` it was built from.

    Examples:
        >>> manager = MaskManager(parse_template(["(", "T", "T", ")"], "T"))
        >>> manager.push("4", 0)
        >>> manager.join()
        '(4'
    """

    def __init__(self, parsed_template: ParsedTemplate, use_fill_index: bool = True) -> None:
        self._template = parsed_template
        self._use_fill_index = use_fill_index
        self._values = [slot.value for slot in parsed_template.slots]
        self._touched = [False] * len(parsed_template.slots)

    def _positions(self, order: int) -> tuple[int, ...]:
        if self._use_fill_index:
            return self._template.fill_index.get(order, ())
        return tuple(
            position
            for position, slot in enumerate(self._template.slots)
            if slot.fill_order == order
        )

    def push(self, character: str, order: int) -> None:
        """Write ``character`` into every slot whose fill order is ``order``.

        An order with no matching slot is ignored.
        """
        for position in self._positions(order):
            self._values[position] = character
            self._touched[position] = True

    @property
    def touched(self) -> tuple[bool, ...]:
        return tuple(self._touched)

    def join(self) -> str:
        """Render slot values up to and including the last touched slot."""
        reached = False
        rendered = ""
        for value, touched in zip(reversed(self._values), reversed(self._touched)):
            if touched:
                reached = True
            if reached:
                rendered = value + rendered
        return rendered
