import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal

from typing_extensions import override

from bookk.bounds import Bounds
from bookk.errors import InvalidOrderingError, TimeRangeError
from bookk.multirange import MultiTimeRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TimeRange:
    """Immutable time range with per-endpoint inclusion.

    Equal endpoints are allowed: with INCLUSIVE bounds the range is a single
    point, with any other bounds it admits nothing. Emptiness is not marked.
    """

    lower: datetime
    upper: datetime
    bounds: Bounds = Bounds.LOWER_INCLUSIVE

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise InvalidOrderingError(
                f"Lower bound is greater than upper bound in range.\n"
                f"Got lower={self.lower!s}, upper={self.upper!s}"
            )
        object.__setattr__(self, "bounds", Bounds.coerce(self.bounds))

    @override
    def __str__(self) -> str:
        """Human-friendly description of the range."""
        from bookk.codec import verbose

        return verbose(self)

    @classmethod
    def from_postgres(cls, text: str) -> "TimeRange":
        """Parse a PostgreSQL range literal such as ``["a","b")``."""
        from bookk.codec import parse

        return parse(text)

    def to_postgres(self) -> str:
        """Render the range as a PostgreSQL range literal."""
        from bookk.codec import format_range

        return format_range(self)

    @property
    def lower_inclusive(self) -> bool:
        return self.bounds.lower_inclusive

    @property
    def upper_inclusive(self) -> bool:
        return self.bounds.upper_inclusive

    def clone(self) -> "TimeRange":
        """Return an equal range that is a distinct object."""
        return replace(self)

    def equal(self, other: "TimeRange") -> bool:
        """Same endpoints (by instant equality) and same bounds."""
        if self is other:
            return True
        return (
            self.lower == other.lower
            and self.upper == other.upper
            and self.bounds == other.bounds
        )

    def contains(self, other: "TimeRange") -> bool:
        """True if every instant admitted by other is admitted by self."""
        if self.lower > other.lower or self.upper < other.upper:
            return False

        # A shared endpoint needs self to be at least as inclusive there
        if self.lower == other.lower and self.lower_inclusive < other.lower_inclusive:
            return False
        if self.upper == other.upper and self.upper_inclusive < other.upper_inclusive:
            return False

        return True

    def overlaps(self, other: "TimeRange") -> Literal[-1, 0, 1]:
        """Report strict interior overlap with another range.

        Touching at a shared endpoint is not an overlap; union() handles
        those cases itself.

        Returns:
            1 if self.upper lies strictly inside other,
            -1 if self lies strictly inside other and the first rule missed,
            0 otherwise
        """
        if self.upper > other.lower and self.upper < other.upper:
            return 1
        elif self.lower > other.lower and self.upper < other.upper:
            return -1
        return 0

    def _leads(self, other: "TimeRange") -> bool:
        """True if self starts no later than other and ends inside it."""
        return self.lower <= other.lower < self.upper <= other.upper

    def union(self, other: "TimeRange") -> "TimeRange | None":
        """Fuse two ranges into one connected range.

        The result's bounds are the OR of both inputs' bounds, giving the
        most inclusive envelope.

        Returns:
            The fused range, or None when the ranges are separated by a gap
        """
        if self.equal(other):
            return self.clone()

        if self.contains(other):
            return self.clone()
        if other.contains(self):
            return other.clone()

        bounds = self.bounds | other.bounds

        overlap = self.overlaps(other)
        if overlap == 1:
            return self._fuse(self.lower, other.upper, bounds)
        if overlap == -1:
            return self._fuse(other.lower, self.upper, bounds)

        # Interior overlaps that overlaps() reports as 0: other ending inside self,
        # or a shared endpoint whose bounds neither side contains
        if self._leads(other):
            return self._fuse(self.lower, other.upper, bounds)
        if other._leads(self):
            return self._fuse(other.lower, self.upper, bounds)

        # Touching endpoints fuse when either side admits the shared instant
        if self.lower == other.upper and (
            self.lower_inclusive or other.upper_inclusive
        ):
            return self._fuse(other.lower, self.upper, bounds)
        if self.upper == other.lower and (
            self.upper_inclusive or other.lower_inclusive
        ):
            return self._fuse(self.lower, other.upper, bounds)

        return None

    def merge(self, other: "TimeRange") -> MultiTimeRange:
        """Combine two ranges into one fused range or two sorted ranges."""
        fused = self.union(other)
        if fused is None:
            pair = sorted((self.clone(), other.clone()), key=lambda r: r.lower)
            return MultiTimeRange(pair)
        return MultiTimeRange([fused.clone()])

    @staticmethod
    def _fuse(lower: datetime, upper: datetime, bounds: Bounds) -> "TimeRange | None":
        try:
            return TimeRange(lower=lower, upper=upper, bounds=bounds)
        except TimeRangeError as exc:
            logger.debug("Could not fuse ranges into [%s, %s]: %s", lower, upper, exc)
            return None
