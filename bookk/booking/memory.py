"""In-memory booking service implementation.

This module provides MemoryBookingService, a BookingService backed by plain
dictionaries. It's useful for testing, prototyping, and ephemeral stores.
"""

import logging
from collections.abc import Iterable

from typing_extensions import override

from bookk.booking import Booking, BookingService, Group, WriteResult
from bookk.timerange import TimeRange

logger = logging.getLogger(__name__)


class MemoryBookingService(BookingService):
    """Booking service keeping bookings and groups in memory.

    Attributes:
        _bookings: Bookings keyed by id, in insertion order
        _groups: Groups keyed by id
    """

    def __init__(
        self, bookings: Iterable[Booking] = (), groups: Iterable[Group] = ()
    ) -> None:
        self._bookings: dict[str, Booking] = {}
        self._groups: dict[str, Group] = {}

        for group in groups:
            self.add_group(group)
        for booking in bookings:
            result = self.create(booking)
            if not result.success:
                raise ValueError(
                    f"Cannot preload booking {booking.id!r}.\n"
                    f"Reason: {result.error}\n"
                    f"Hint: Booking ids must be unique within a service"
                )

    def add_group(self, group: Group) -> None:
        """Register or replace a group."""
        self._groups[group.id] = group

    @override
    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    @override
    def last_bookings_by_user(self, user_id: str, limit: int) -> list[Booking]:
        return self._latest(
            (b for b in self._bookings.values() if b.user_id == user_id), limit
        )

    @override
    def last_bookings_by_group(self, group_id: str, limit: int) -> list[Booking]:
        members = self._members(group_id)
        return self._latest(
            (b for b in self._bookings.values() if b.user_id in members), limit
        )

    @override
    def bookings_in_range_by_user(
        self, user_id: str, time_range: TimeRange
    ) -> list[Booking]:
        return self._within(
            (b for b in self._bookings.values() if b.user_id == user_id), time_range
        )

    @override
    def bookings_in_range_by_group(
        self, group_id: str, time_range: TimeRange
    ) -> list[Booking]:
        members = self._members(group_id)
        return self._within(
            (b for b in self._bookings.values() if b.user_id in members), time_range
        )

    @override
    def create(self, booking: Booking) -> WriteResult:
        if booking.id in self._bookings:
            logger.warning("Rejected booking %s: id already exists", booking.id)
            return WriteResult(
                success=False,
                booking=None,
                error=KeyError(f"Booking {booking.id!r} already exists"),
            )
        self._bookings[booking.id] = booking
        logger.info("Created booking %s (%s)", booking.id, booking.time_range)
        return WriteResult(success=True, booking=booking, error=None)

    @override
    def update(self, booking: Booking) -> WriteResult:
        if booking.id not in self._bookings:
            logger.warning("Rejected update of booking %s: not found", booking.id)
            return WriteResult(
                success=False,
                booking=None,
                error=KeyError(f"Booking {booking.id!r} not found"),
            )
        self._bookings[booking.id] = booking
        logger.info("Updated booking %s (%s)", booking.id, booking.time_range)
        return WriteResult(success=True, booking=booking, error=None)

    @override
    def delete(self, booking_id: str) -> WriteResult:
        removed = self._bookings.pop(booking_id, None)
        if removed is None:
            logger.warning("Rejected delete of booking %s: not found", booking_id)
            return WriteResult(
                success=False,
                booking=None,
                error=KeyError(f"Booking {booking_id!r} not found"),
            )
        logger.info("Deleted booking %s", booking_id)
        return WriteResult(success=True, booking=removed, error=None)

    def _members(self, group_id: str) -> frozenset[str]:
        try:
            return self._groups[group_id].user_ids
        except KeyError:
            raise KeyError(
                f"Unknown group {group_id!r}.\n"
                f"Known groups: {sorted(self._groups)}\n"
                f"Hint: Register it first with add_group(Group(...))"
            ) from None

    @staticmethod
    def _latest(bookings: Iterable[Booking], limit: int) -> list[Booking]:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        ordered = sorted(bookings, key=lambda b: b.created_at, reverse=True)
        return ordered[:limit]

    @staticmethod
    def _within(bookings: Iterable[Booking], time_range: TimeRange) -> list[Booking]:
        matches = [b for b in bookings if time_range.contains(b.time_range)]
        return sorted(matches, key=lambda b: (b.starts_at, b.ends_at))
