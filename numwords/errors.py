# errors.py

from __future__ import annotations

from typing import Any


class FormatError(ValueError):
    """Base class for every conversion failure raised by numwords."""

    kind = "format_error"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidFormat(FormatError):
    """Input is not a well-formed numeral (or not a pure digit string)."""

    kind = "invalid_format"


class Overflow(FormatError):
    """Magnitude does not fit 128 bits, or a value does not fit the requested width."""

    kind = "overflow"


class NotFinite(FormatError):
    """Float input is NaN or infinite."""

    kind = "not_finite"
