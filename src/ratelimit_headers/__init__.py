# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Ratelimit Headers - Rate limit response header parsing for API clients.

This library turns the rate limit headers sent by OpenAI-style APIs into
typed values, most notably the compact reset durations such as
``x-ratelimit-reset-tokens: 6m45s99ms``.

Key Features:
    - Compact duration parsing into datetime.timedelta
    - Immutable per-response metadata exposing raw and parsed reset values
    - Provider-agnostic RateLimitInfo snapshots for schedulers
    - Configurable handling of malformed reset headers

Quick Start:
    >>> from ratelimit_headers import parse_duration, ResponseMetadata
    >>>
    >>> parse_duration("6m45s99ms")
    datetime.timedelta(seconds=405, microseconds=99000)
    >>>
    >>> metadata = ResponseMetadata.from_headers(response.headers)
    >>> metadata.reset_tokens, metadata.reset_tokens_timespan
    ('500ms', datetime.timedelta(microseconds=500000))

Main Exports:
    - parse_duration: Compact duration parser
    - ResponseMetadata: Client context reported in response headers
    - OpenAIProvider, ProviderInterface, RateLimitInfo: Provider layer
    - HeaderParsingConfig: Configuration options

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import HeaderParsingConfig, InvalidDurationPolicy
from .duration import parse_duration
from .exceptions import (
    ConfigurationError,
    DurationFormatError,
    HeaderValueError,
    RateLimitHeaderError,
)
from .providers import (
    OpenAIProvider,
    ProviderInterface,
    RateLimitInfo,
)
from .types import ResponseMetadata

__all__ = [
    # Exceptions
    "ConfigurationError",
    "DurationFormatError",
    # Configuration
    "HeaderParsingConfig",
    "HeaderValueError",
    "InvalidDurationPolicy",
    # Providers
    "OpenAIProvider",
    "ProviderInterface",
    "RateLimitHeaderError",
    "RateLimitInfo",
    # Types
    "ResponseMetadata",
    # Parsing
    "parse_duration",
]
