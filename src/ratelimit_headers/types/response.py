# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response metadata reported by the API in its response headers.

Every response carries the same client context alongside its payload:
organization, request id, API version, processing time and the current
rate limit counters. ResponseMetadata captures those values once, when the
response is received, and exposes the reset durations both as the raw
header strings and as parsed timedeltas.
"""

from collections.abc import Mapping
from datetime import timedelta

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from ..duration import parse_duration
from ..exceptions import HeaderValueError

ORGANIZATION_HEADER = "openai-organization"
REQUEST_ID_HEADER = "x-request-id"
VERSION_HEADER = "openai-version"
PROCESSING_MS_HEADER = "openai-processing-ms"

LIMIT_REQUESTS_HEADER = "x-ratelimit-limit-requests"
LIMIT_TOKENS_HEADER = "x-ratelimit-limit-tokens"
REMAINING_REQUESTS_HEADER = "x-ratelimit-remaining-requests"
REMAINING_TOKENS_HEADER = "x-ratelimit-remaining-tokens"
RESET_REQUESTS_HEADER = "x-ratelimit-reset-requests"
RESET_TOKENS_HEADER = "x-ratelimit-reset-tokens"


def normalize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Lowercase header names for case-insensitive lookups."""
    return {k.lower(): v for k, v in headers.items()}


def parse_int_header(headers: Mapping[str, str], name: str) -> int | None:
    """Read a non-negative integer header from already-normalized headers."""
    value = headers.get(name)
    if value is None:
        return None
    if not (value.isascii() and value.isdigit()):
        raise HeaderValueError(name, value)
    return int(value)


class ResponseMetadata(BaseModel):
    """
    Client context and rate limit state attached to a single API response.

    All fields are optional because any header may be missing, and the
    model is frozen: values are set once at construction and never change.

    The reset fields keep the header text exactly as received (for example
    ``"6m45s99ms"``). The matching ``*_timespan`` properties parse it on
    access and raise DurationFormatError if the text is malformed.
    """

    model_config = ConfigDict(frozen=True)

    organization: str | None = None
    request_id: str | None = None
    openai_version: str | None = None
    processing_time: timedelta | None = None

    limit_requests: int | None = None
    limit_tokens: int | None = None
    remaining_requests: int | None = None
    remaining_tokens: int | None = None

    reset_requests: str | None = None
    reset_tokens: str | None = None

    @property
    def reset_requests_timespan(self) -> timedelta | None:
        """Time until the request-based limit resets."""
        if self.reset_requests is None:
            return None
        return parse_duration(self.reset_requests)

    @property
    def reset_tokens_timespan(self) -> timedelta | None:
        """Time until the token-based limit resets."""
        if self.reset_tokens is None:
            return None
        return parse_duration(self.reset_tokens)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Self:
        """Build metadata from HTTP response headers.

        Header names are matched case-insensitively. Reset durations are
        stored unparsed, so a malformed reset value does not prevent the
        rest of the metadata from being built.

        Raises:
            HeaderValueError: If a counter or processing time header is not
                a number.
        """
        normalized = normalize_headers(headers)

        processing_time = None
        processing_ms = normalized.get(PROCESSING_MS_HEADER)
        if processing_ms is not None:
            try:
                processing_time = timedelta(milliseconds=float(processing_ms))
            except (ValueError, OverflowError):
                raise HeaderValueError(PROCESSING_MS_HEADER, processing_ms) from None

        return cls(
            organization=normalized.get(ORGANIZATION_HEADER),
            request_id=normalized.get(REQUEST_ID_HEADER),
            openai_version=normalized.get(VERSION_HEADER),
            processing_time=processing_time,
            limit_requests=parse_int_header(normalized, LIMIT_REQUESTS_HEADER),
            limit_tokens=parse_int_header(normalized, LIMIT_TOKENS_HEADER),
            remaining_requests=parse_int_header(normalized, REMAINING_REQUESTS_HEADER),
            remaining_tokens=parse_int_header(normalized, REMAINING_TOKENS_HEADER),
            reset_requests=normalized.get(RESET_REQUESTS_HEADER),
            reset_tokens=normalized.get(RESET_TOKENS_HEADER),
        )

    def to_json(self) -> str:
        """Serialize the header-derived fields, omitting missing ones."""
        return self.model_dump_json(exclude_none=True)


__all__ = [
    "ResponseMetadata",
    "normalize_headers",
    "parse_int_header",
]
