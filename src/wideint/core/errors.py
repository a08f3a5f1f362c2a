class WideIntError(Exception):
    """Base class for errors raised by wideint."""


class InvalidFormatError(WideIntError, ValueError):
    """Raised when a decimal string contains a non-digit character."""

    def __init__(self, text: str, position: int) -> None:
        super().__init__(
            f"invalid decimal integer {text!r}: "
            f"unexpected {text[position]!r} at position {position}"
        )
        self.text = text
        self.position = position


class DivisionByZeroError(WideIntError, ZeroDivisionError):
    """Raised by divmod, / and % when the divisor is zero."""
