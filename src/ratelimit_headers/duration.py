# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Compact duration parsing for rate limit reset headers.

OpenAI-style APIs report the time until a rate limit window resets as a
terse string of unit-suffixed integers, for example::

    x-ratelimit-reset-requests: 6m45s99ms
    x-ratelimit-reset-tokens: 500ms

Segments always appear in the order hours, minutes, seconds, milliseconds
and each one is optional, so an empty string is a valid zero duration.
"""

import re
from datetime import timedelta

from .exceptions import DurationFormatError

# The minute group must not swallow the "m" of a millisecond segment.
# Only the start is anchored; trailing content is ignored unless strict.
# Digits are ASCII only, so other Unicode digits never start a segment.
_TIMESTAMP_PATTERN = re.compile(
    r"^(?P<hour>[0-9]+h)?(?P<mins>[0-9]+m(?!s))?(?P<secs>[0-9]+s)?(?P<ms>[0-9]+ms)?"
)


def _magnitude(match: re.Match[str], group: str, suffix: str) -> int:
    value = match.group(group)
    if value is None:
        return 0
    return int(value[: -len(suffix)])


def parse_duration(timestamp: str, *, strict: bool = False) -> timedelta:
    """
    Parse a compact duration string into a timedelta.

    Args:
        timestamp: Raw header value such as ``"6m45s99ms"`` or ``"1h30m15s1ms"``.
        strict: Require the whole string to be made of segments. By default
            anything after the last recognized segment is ignored, so
            ``"6m45s junk"`` parses as 6 minutes 45 seconds.

    Returns:
        The sum of all present segments. Missing segments contribute zero.

    Raises:
        DurationFormatError: If the string cannot be matched, or if a
            magnitude is too large to be represented.

    Example:
        >>> parse_duration("6m45s99ms")
        datetime.timedelta(seconds=405, microseconds=99000)
        >>> parse_duration("")
        datetime.timedelta(0)
    """
    try:
        if strict:
            match = _TIMESTAMP_PATTERN.fullmatch(timestamp)
        else:
            match = _TIMESTAMP_PATTERN.match(timestamp)
    except TypeError as e:
        raise DurationFormatError(timestamp) from e

    if match is None:
        raise DurationFormatError(timestamp)

    try:
        hours = _magnitude(match, "hour", "h")
        minutes = _magnitude(match, "mins", "m")
        seconds = _magnitude(match, "secs", "s")
        milliseconds = _magnitude(match, "ms", "ms")

        # Milliseconds are added on their own instead of being carried
        # into the seconds field first.
        return timedelta(hours=hours, minutes=minutes, seconds=seconds) + timedelta(
            milliseconds=milliseconds
        )
    except (ValueError, OverflowError) as e:
        raise DurationFormatError(timestamp) from e


__all__ = [
    "parse_duration",
]
