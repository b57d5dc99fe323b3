from __future__ import annotations


class ColorParseError(ValueError):
    """Raised when a colour string cannot be parsed."""

    def __init__(self, value: str, role: str = "color") -> None:
        self.value = value
        self.role = role
        super().__init__(f"invalid {role}: {value!r}")
