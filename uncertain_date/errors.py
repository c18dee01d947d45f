"""Errors raised while constructing or parsing uncertain dates.

Every error is raised by the constructing or parsing call itself. Nothing is
retried or partially built: a call either returns a complete value or raises.
"""


class UncertainDateError(Exception):
    """Base error for the uncertain_date package."""


class NullArgumentError(UncertainDateError, TypeError):
    """Raised when a required argument is None."""


class CalendarError(UncertainDateError, ValueError):
    """Raised when year, month and day do not form a valid calendar date."""


class RangeError(UncertainDateError, ValueError):
    """Raised when an explicit range is reversed or crosses a year boundary."""


class FormatError(UncertainDateError, ValueError):
    """Raised when text matches neither the dotted nor the ISO grammar."""

    def __init__(self, message: str, text: str, position: int = 0) -> None:
        super().__init__(message)
        self.text = text
        self.position = position

    def __str__(self) -> str:
        return f"{self.args[0]} (text={self.text!r}, position={self.position})"


class SerializationError(UncertainDateError, ValueError):
    """Raised when a record does not conform to the uncertain date schema."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
