from .booking import Booking, BookingService, Group, WriteResult
from .bounds import Bounds
from .codec import format_range, parse, verbose
from .errors import (
    InvalidBoundsError,
    InvalidOrderingError,
    RangeParseError,
    TimeRangeError,
)
from .multirange import MultiTimeRange
from .timerange import TimeRange

__all__ = [
    "TimeRange",
    "MultiTimeRange",
    "Bounds",
    "parse",
    "format_range",
    "verbose",
    "TimeRangeError",
    "InvalidOrderingError",
    "InvalidBoundsError",
    "RangeParseError",
    "Booking",
    "Group",
    "BookingService",
    "WriteResult",
]
