# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Provider interface for API-specific rate limit header handling."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RateLimitInfo:
    """Parsed rate limit information from API response."""

    rpm_remaining: int | None = None
    rpm_limit: int | None = None
    rpm_reset: float | None = None  # Unix timestamp
    tpm_remaining: int | None = None
    tpm_limit: int | None = None
    tpm_reset: float | None = None  # Unix timestamp
    retry_after: int | None = None  # Seconds
    is_rate_limited: bool = False  # True if 429 response
    timestamp: float = field(default_factory=time.time)


class ProviderInterface(ABC):
    """
    Abstract interface for API provider integration.

    Providers are responsible for parsing rate limit information from
    responses (headers or body) into a provider-neutral RateLimitInfo.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique provider name (e.g., 'openai', 'azure-openai')."""
        pass

    @abstractmethod
    def parse_rate_limit_response(
        self,
        headers: dict[str, str],
        body: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> RateLimitInfo:
        """Parse rate limit information from an HTTP response.

        This is the ONLY place where HTTP headers are interpreted for rate
        limit information.

        Args:
            headers: HTTP response headers as a dictionary. Keys are header
                names (case-insensitive matching recommended). Common headers
                include 'x-ratelimit-remaining-requests', 'x-ratelimit-reset-tokens',
                'retry-after', etc.
            body: Optional parsed JSON response body. Some providers include
                rate limit info in the response body rather than headers.
                Default is None.
            status_code: Optional HTTP status code. Used to detect 429 (rate
                limited) responses and set is_rate_limited=True. Default is None.

        Returns:
            A RateLimitInfo object containing the parsed rate limit data.
            Fields that cannot be determined from the response should be
            left as None.

        Raises:
            HeaderValueError: If a counter header holds a non-numeric value.
            DurationFormatError: If a reset header holds a malformed
                duration and the provider is configured to raise.
        """
        pass
