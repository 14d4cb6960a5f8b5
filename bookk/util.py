"""Utility constants for bookk.

DATETIME_FORMAT is the canonical endpoint format shared by the range codec
and the verbose form. Time unit constants represent durations in seconds.
"""

# Canonical endpoint format: "YYYY-MM-DD HH:MM:SS", no fraction, no zone
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DAY = 86400
