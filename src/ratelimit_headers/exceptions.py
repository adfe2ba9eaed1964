# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the ratelimit-headers library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from RateLimitHeaderError, making it easy to catch
every header-parsing error with a single except clause. The concrete
errors also inherit from ValueError, since each one reports a value that
could not be interpreted.
"""


class RateLimitHeaderError(Exception):
    """Base exception for all ratelimit-headers errors.

    Example:
        try:
            metadata = ResponseMetadata.from_headers(response.headers)
        except RateLimitHeaderError as e:
            logger.error(f"Unusable rate limit headers: {e}")
    """

    pass


class DurationFormatError(RateLimitHeaderError, ValueError):
    """Raised when a compact duration string cannot be parsed.

    Compact durations are the values OpenAI-style APIs send in
    ``x-ratelimit-reset-requests`` and ``x-ratelimit-reset-tokens``,
    e.g. ``"6m45s99ms"``.

    Attributes:
        input: The offending string, exactly as it was passed to the parser.

    Example:
        try:
            reset = parse_duration(headers["x-ratelimit-reset-tokens"])
        except DurationFormatError as e:
            logger.warning(f"Ignoring reset header {e.input!r}")
            reset = None
    """

    def __init__(self, input: str):
        super().__init__(f"Could not parse timestamp header. '{input}'.")
        self.input = input


class HeaderValueError(RateLimitHeaderError, ValueError):
    """Raised when a numeric rate limit header holds a non-numeric value.

    Attributes:
        header: The lowercase header name, e.g. ``x-ratelimit-limit-tokens``.
        value: The raw header value that failed to parse.
    """

    def __init__(self, header: str, value: str):
        super().__init__(f"Invalid value for header {header}: {value!r}")
        self.header = header
        self.value = value


class ConfigurationError(RateLimitHeaderError, ValueError):
    """Raised when configuration is invalid.

    Example:
        try:
            config = HeaderParsingConfig(on_invalid_duration="skip")
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            raise SystemExit(1)
    """

    pass


__all__ = [
    "ConfigurationError",
    "DurationFormatError",
    "HeaderValueError",
    "RateLimitHeaderError",
]
