from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, overload

from typing_extensions import override

if TYPE_CHECKING:
    from bookk.timerange import TimeRange


def sort_key(time_range: "TimeRange") -> tuple:
    """Order by lower endpoint, then upper endpoint, then bounds ordinal."""
    return (time_range.lower, time_range.upper, int(time_range.bounds))


class MultiTimeRange(Sequence["TimeRange"]):
    """Immutable ordered collection of time ranges.

    Returned by TimeRange.merge(): either one fused range or two disjoint
    ranges ordered by their lower endpoint.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable["TimeRange"] = ()) -> None:
        self._ranges: tuple["TimeRange", ...] = tuple(ranges)

    @overload
    def __getitem__(self, index: int) -> "TimeRange": ...

    @overload
    def __getitem__(self, index: slice) -> "MultiTimeRange": ...

    @override
    def __getitem__(self, index: int | slice) -> "TimeRange | MultiTimeRange":
        if isinstance(index, slice):
            return MultiTimeRange(self._ranges[index])
        return self._ranges[index]

    @override
    def __len__(self) -> int:
        return len(self._ranges)

    @override
    def __iter__(self) -> Iterator["TimeRange"]:
        return iter(self._ranges)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiTimeRange):
            return NotImplemented
        return self._ranges == other._ranges

    @override
    def __hash__(self) -> int:
        return hash(self._ranges)

    @override
    def __repr__(self) -> str:
        return f"MultiTimeRange({list(self._ranges)!r})"

    @override
    def __str__(self) -> str:
        return "{" + ", ".join(str(r) for r in self._ranges) + "}"

    def sorted(self) -> "MultiTimeRange":
        """Return a copy ordered by (lower, upper, bounds)."""
        return MultiTimeRange(sorted(self._ranges, key=sort_key))

    def is_sorted(self) -> bool:
        return all(
            sort_key(a) <= sort_key(b) for a, b in zip(self._ranges, self._ranges[1:])
        )
