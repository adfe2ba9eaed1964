# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OpenAI provider: x-ratelimit-* headers with compact reset durations."""

import logging
from datetime import timedelta
from typing import Any

from ..config import HeaderParsingConfig, InvalidDurationPolicy
from ..duration import parse_duration
from ..exceptions import DurationFormatError
from ..types.response import (
    RESET_REQUESTS_HEADER,
    RESET_TOKENS_HEADER,
    ResponseMetadata,
    normalize_headers,
)
from .base import ProviderInterface, RateLimitInfo

logger = logging.getLogger(__name__)

RETRY_AFTER_HEADER = "retry-after"


class OpenAIProvider(ProviderInterface):
    """
    Provider for OpenAI-compatible APIs.

    Request limits map to the rpm_* fields and token limits to the tpm_*
    fields of RateLimitInfo. Reset headers are relative durations such as
    ``"6m45s99ms"``; they are converted to absolute unix timestamps using
    the snapshot's own creation time.
    """

    def __init__(self, config: HeaderParsingConfig | None = None):
        self.config = config or HeaderParsingConfig()

    @property
    def name(self) -> str:
        return "openai"

    def parse_response_metadata(self, headers: dict[str, str]) -> ResponseMetadata:
        """Build the full ResponseMetadata for a response."""
        return ResponseMetadata.from_headers(headers)

    def parse_reset(self, header: str, value: str | None) -> timedelta | None:
        """Parse a reset duration according to the configured policy."""
        if value is None:
            return None
        try:
            return parse_duration(value, strict=self.config.strict_durations)
        except DurationFormatError:
            if self.config.on_invalid_duration is InvalidDurationPolicy.RAISE:
                raise
            if self.config.log_invalid_headers:
                logger.warning(f"Ignoring malformed {header} header: {value!r}")
            return None

    def parse_rate_limit_response(
        self,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> RateLimitInfo:
        metadata = self.parse_response_metadata(headers)
        info = RateLimitInfo(
            rpm_remaining=metadata.remaining_requests,
            rpm_limit=metadata.limit_requests,
            tpm_remaining=metadata.remaining_tokens,
            tpm_limit=metadata.limit_tokens,
            is_rate_limited=status_code == 429,
        )

        requests_reset = self.parse_reset(RESET_REQUESTS_HEADER, metadata.reset_requests)
        if requests_reset is not None:
            info.rpm_reset = info.timestamp + requests_reset.total_seconds()

        tokens_reset = self.parse_reset(RESET_TOKENS_HEADER, metadata.reset_tokens)
        if tokens_reset is not None:
            info.tpm_reset = info.timestamp + tokens_reset.total_seconds()

        retry_after = normalize_headers(headers).get(RETRY_AFTER_HEADER)
        if retry_after is not None:
            try:
                info.retry_after = int(retry_after)
            except ValueError:
                # HTTP-date form is not used by this provider
                logger.debug(f"Ignoring non-integer retry-after: {retry_after!r}")

        logger.debug(
            f"Parsed rate limits for request {metadata.request_id}: "
            f"rpm {info.rpm_remaining}/{info.rpm_limit}, "
            f"tpm {info.tpm_remaining}/{info.tpm_limit}"
        )
        return info


__all__ = [
    "OpenAIProvider",
]
