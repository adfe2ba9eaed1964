# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Header parsing configuration for ratelimit-headers.

This module provides the configuration consumed by providers when they
turn response headers into rate limit snapshots.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import ConfigurationError


class InvalidDurationPolicy(Enum):
    """What a provider does with a reset header it cannot parse.

    - RAISE: Propagate DurationFormatError to the caller.
    - IGNORE: Leave the reset field unset and carry on with the other headers.
    """

    RAISE = "raise"
    IGNORE = "ignore"


@dataclass
class HeaderParsingConfig:
    """
    Configuration for header parsing.

    The defaults reproduce the behavior of the bare parser: loose matching
    and hard failure on malformed reset values.
    """

    strict_durations: bool = False
    """Require reset durations to consist only of segments (no trailing text)."""

    on_invalid_duration: InvalidDurationPolicy | str = InvalidDurationPolicy.RAISE
    """Policy for malformed reset durations: 'raise' or 'ignore'."""

    log_invalid_headers: bool = True
    """Log a warning whenever a malformed value is ignored."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.on_invalid_duration, str):
            try:
                self.on_invalid_duration = InvalidDurationPolicy(
                    self.on_invalid_duration
                )
            except ValueError:
                raise ConfigurationError(
                    "on_invalid_duration must be 'raise' or 'ignore'"
                ) from None


__all__ = [
    "HeaderParsingConfig",
    "InvalidDurationPolicy",
]
