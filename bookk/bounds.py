"""Bound inclusion tags for time ranges.

A tag is a 2-bit field: bit 1 marks the lower bound as inclusive and
bit 0 marks the upper bound as inclusive. OR-ing two tags always gives a
valid tag that is at least as inclusive as either operand.
"""

from enum import IntFlag

from bookk.errors import InvalidBoundsError


class Bounds(IntFlag):
    EXCLUSIVE = 0b00  # (lower, upper)
    UPPER_INCLUSIVE = 0b01  # (lower, upper]
    LOWER_INCLUSIVE = 0b10  # [lower, upper)
    INCLUSIVE = 0b11  # [lower, upper]

    @property
    def lower_inclusive(self) -> bool:
        return bool(self & Bounds.LOWER_INCLUSIVE)

    @property
    def upper_inclusive(self) -> bool:
        return bool(self & Bounds.UPPER_INCLUSIVE)

    @classmethod
    def coerce(cls, value: "Bounds | int") -> "Bounds":
        """Validate a raw tag and return the matching member.

        Raises:
            InvalidBoundsError: If value is not one of 0b00, 0b01, 0b10, 0b11
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidBoundsError(
                f"Bounds not recognized in range.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Hint: Use one of Bounds.EXCLUSIVE, Bounds.UPPER_INCLUSIVE, "
                f"Bounds.LOWER_INCLUSIVE, Bounds.INCLUSIVE"
            )
        if value not in (0b00, 0b01, 0b10, 0b11):
            raise InvalidBoundsError(
                f"Bounds not recognized in range.\n"
                f"Got {value!r} ({int(value):#b}), expected a value in 0b00..0b11"
            )
        return cls(int(value))
