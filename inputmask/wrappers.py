"""Wrapper classes that keep mask state for a single edit control."""

from inputmask.engine import InputMask


class MaskedField:
    """Raw value of one text field together with the mask that formats it.

    The field mirrors how a UI control uses an InputMask: it shows
    ``mask(raw)``, and every time the control reports a new displayed value
    the raw value is recovered through ``unmask``.

    Attributes:
        raw: The bare characters entered so far
        input_mask: The InputMask formatting this field

    Examples:
        field = MaskedField(get_preset("phone_us"))
        field.type("5551234567")
        field.display   # '(555) 123-4567'
        field.backspace()
        field.raw       # '555123456'
    """

    def __init__(self, input_mask: InputMask, raw: str = ""):
        """Initialize the field.

        Args:
            input_mask: The mask formatting this field
            raw: Initial raw value
        """
        self._mask = input_mask
        self._raw = raw

    @property
    def input_mask(self) -> InputMask:
        return self._mask

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def display(self) -> str:
        """Masked value the control should show."""
        return self._mask.mask(self._raw) or ""

    def update(self, masked_value: str) -> str:
        """Apply a displayed value reported by the control.

        A value that cannot be interpreted leaves the raw value unchanged.

        Returns:
            The display value after the update
        """
        raw = self._mask.unmask(self._raw, masked_value)
        if isinstance(raw, str):
            self._raw = raw
        return self.display

    def type(self, text: str) -> list[str]:
        """Type ``text`` one keystroke at a time.

        Returns:
            Display value after each keystroke
        """
        displays = []
        for character in text:
            displays.append(self.update(self.display + character))
        return displays

    def backspace(self, count: int = 1) -> str:
        """Delete the last ``count`` displayed characters one at a time."""
        for _ in range(count):
            display = self.display
            if not display:
                break
            self.update(display[:-1])
        return self.display

    def clear(self) -> None:
        self._raw = ""

    def __repr__(self) -> str:
        return f"MaskedField(raw={self._raw!r}, display={self.display!r})"

    def __str__(self) -> str:
        return self.display
