"""Booking records and the service interface around time ranges.

Bookings only store a time span alongside opaque identifiers;
every time-based query goes through TimeRange.contains().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from bookk.bounds import Bounds
from bookk.timerange import TimeRange
from bookk.util import DAY


@dataclass(frozen=True, kw_only=True)
class Booking:
    """A reservation of an item by a user.

    Attributes:
        id: Booking identifier
        user_id: ID of the user who made the booking
        item_id: ID of the booked item
        starts_at: Start of the reservation (inclusive)
        ends_at: End of the reservation (exclusive)
        created_at: When the booking was made
        description: Free-form note
        cancelled: True if the booking was cancelled
    """

    id: str
    user_id: str
    item_id: str
    starts_at: datetime
    ends_at: datetime
    created_at: datetime
    description: str = ""
    cancelled: bool = False

    def __post_init__(self) -> None:
        # Validates ordering
        _ = self.time_range

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(
            lower=self.starts_at, upper=self.ends_at, bounds=Bounds.LOWER_INCLUSIVE
        )


@dataclass(frozen=True, kw_only=True)
class Group:
    """A named set of users whose bookings can be queried together."""

    id: str
    name: str
    created_at: datetime
    description: str = ""
    user_ids: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class WriteResult:
    """Result of a write operation (create/update/delete).

    Attributes:
        success: True if the operation succeeded, False otherwise
        booking: The stored (or removed) booking if successful, None if failed
        error: The exception that occurred if failed, None if successful
    """

    success: bool
    booking: Booking | None
    error: Exception | None


def day_range(day: date) -> TimeRange:
    """Return ``[day 00:00:00, next day 00:00:00)``."""
    start = datetime.combine(day, time.min)
    return TimeRange(
        lower=start,
        upper=start + timedelta(seconds=DAY),
        bounds=Bounds.LOWER_INCLUSIVE,
    )


class BookingService(ABC):
    """Abstract base class for booking stores.

    Backends implement lookups by id, user and group plus the writes; the
    date queries are derived from the range queries.
    """

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        pass

    @abstractmethod
    def last_bookings_by_user(self, user_id: str, limit: int) -> list[Booking]:
        """Return up to ``limit`` bookings of a user, newest created first."""
        pass

    @abstractmethod
    def last_bookings_by_group(self, group_id: str, limit: int) -> list[Booking]:
        """Return up to ``limit`` bookings of a group's users, newest created first."""
        pass

    @abstractmethod
    def bookings_in_range_by_user(
        self, user_id: str, time_range: TimeRange
    ) -> list[Booking]:
        """Return a user's bookings that fall entirely within time_range."""
        pass

    @abstractmethod
    def bookings_in_range_by_group(
        self, group_id: str, time_range: TimeRange
    ) -> list[Booking]:
        """Return a group's bookings that fall entirely within time_range."""
        pass

    @abstractmethod
    def create(self, booking: Booking) -> WriteResult:
        pass

    @abstractmethod
    def update(self, booking: Booking) -> WriteResult:
        pass

    @abstractmethod
    def delete(self, booking_id: str) -> WriteResult:
        pass

    def bookings_on_date_by_user(self, user_id: str, day: date) -> list[Booking]:
        return self.bookings_in_range_by_user(user_id, day_range(day))

    def bookings_on_date_by_group(self, group_id: str, day: date) -> list[Booking]:
        return self.bookings_in_range_by_group(group_id, day_range(day))
