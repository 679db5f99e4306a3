class ShamsiError(Exception):
    """Base error."""

class InvalidMonthError(ShamsiError, ValueError):
    """Raised when a month number falls outside 1..12."""

class InvalidDayError(ShamsiError, ValueError):
    """Raised when a day number falls outside its month."""

class ParseError(ShamsiError, ValueError):
    """Raised when a date string cannot be split into numeric components."""

class EngineUnavailableError(ShamsiError):
    """Raised when an engine spec has no builder."""
