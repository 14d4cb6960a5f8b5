"""PostgreSQL range literal codec.

Reads and writes the textual form used by PostgreSQL's ``tsrange``:
``[`` / ``]`` mark an inclusive endpoint, ``(`` / ``)`` an exclusive one,
and the two endpoints are comma-separated ``YYYY-MM-DD HH:MM:SS`` values,
optionally double-quoted. Output always quotes both endpoints.
"""

import logging
import re
from datetime import datetime

from bookk.bounds import Bounds
from bookk.errors import RangeParseError
from bookk.timerange import TimeRange
from bookk.util import DATETIME_FORMAT

logger = logging.getLogger(__name__)

_ENDPOINT_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")

_LITERAL_TEMPLATES: dict[Bounds, str] = {
    Bounds.EXCLUSIVE: '("{lower}","{upper}")',
    Bounds.INCLUSIVE: '["{lower}","{upper}"]',
    Bounds.UPPER_INCLUSIVE: '("{lower}","{upper}"]',
    Bounds.LOWER_INCLUSIVE: '["{lower}","{upper}")',
}

_VERBOSE_TEMPLATES: dict[Bounds, str] = {
    Bounds.EXCLUSIVE: "Past {lower} and before {upper}",
    Bounds.INCLUSIVE: "From {lower} to {upper}",
    Bounds.UPPER_INCLUSIVE: "Past {lower} to {upper}",
    Bounds.LOWER_INCLUSIVE: "From {lower} and before {upper}",
}


def parse(text: str) -> TimeRange:
    """Parse a range literal such as ``["2024-10-13 10:00:00","2024-10-13 15:00:00")``.

    The parser is permissive on delimiters (anything other than ``[`` or
    ``]`` leaves the matching bound exclusive) and strict on endpoint
    format. Tokens past the second comma-separated value are ignored.

    Raises:
        RangeParseError: If the literal is malformed or an endpoint does not
            match ``YYYY-MM-DD HH:MM:SS``
        InvalidOrderingError: If the lower endpoint is after the upper one
    """
    if len(text) < 2:
        logger.debug("Rejected range literal %r: too short", text)
        raise RangeParseError(f"Error parsing time range: {text!r} is too short")

    bounds = Bounds.EXCLUSIVE
    if text[0] == "[":
        bounds |= Bounds.LOWER_INCLUSIVE
    if text[-1] == "]":
        bounds |= Bounds.UPPER_INCLUSIVE

    unquoted = text.replace('"', "")
    tokens = unquoted[1:-1].split(",")[:2]
    if len(tokens) < 2:
        logger.debug("Rejected range literal %r: missing endpoint", text)
        raise RangeParseError(
            f"Error parsing time range: {text!r} does not have two endpoints"
        )

    lower = _parse_endpoint(tokens[0], text)
    upper = _parse_endpoint(tokens[1], text)
    return TimeRange(lower=lower, upper=upper, bounds=bounds)


def format_range(time_range: TimeRange) -> str:
    """Render a range as a quoted PostgreSQL range literal."""
    return _LITERAL_TEMPLATES[time_range.bounds].format(
        lower=time_range.lower.strftime(DATETIME_FORMAT),
        upper=time_range.upper.strftime(DATETIME_FORMAT),
    )


def verbose(time_range: TimeRange) -> str:
    """Describe a range in words, e.g. ``From <lower> and before <upper>``.

    Diagnostic only; the result cannot be parsed back.
    """
    return _VERBOSE_TEMPLATES[time_range.bounds].format(
        lower=time_range.lower.strftime(DATETIME_FORMAT),
        upper=time_range.upper.strftime(DATETIME_FORMAT),
    )


def _parse_endpoint(token: str, text: str) -> datetime:
    # strptime alone accepts single-digit fields and padded whitespace
    if not _ENDPOINT_PATTERN.fullmatch(token):
        logger.debug("Rejected range literal %r: bad endpoint %r", text, token)
        raise RangeParseError(
            f"Error parsing time range: endpoint {token!r} does not match "
            f"'YYYY-MM-DD HH:MM:SS'"
        )
    try:
        return datetime.strptime(token, DATETIME_FORMAT)
    except ValueError as exc:
        logger.debug("Rejected range literal %r: %s", text, exc)
        raise RangeParseError(
            f"Error parsing time range: endpoint {token!r} does not match "
            f"'YYYY-MM-DD HH:MM:SS'"
        ) from exc
