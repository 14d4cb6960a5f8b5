"""Exception hierarchy for time range construction and parsing."""


class TimeRangeError(ValueError):
    """Base class for all time range errors."""


class InvalidOrderingError(TimeRangeError):
    """Raised when the lower bound of a range is after its upper bound."""


class InvalidBoundsError(TimeRangeError):
    """Raised when a bounds tag is not one of the four recognized values."""


class RangeParseError(TimeRangeError):
    """Raised when a range literal cannot be parsed."""
