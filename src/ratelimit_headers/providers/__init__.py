# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Provider abstractions for API-specific rate limit header handling.

This subpackage defines the interface for integrating different API providers
with rate limit consumers such as schedulers. Providers are responsible for
parsing rate limit information from HTTP response headers/body.

Exported classes:
    ProviderInterface: Abstract base class for provider implementations.
    RateLimitInfo: Parsed rate limit data from API responses.
    OpenAIProvider: Provider for OpenAI-compatible x-ratelimit-* headers.
"""

from .base import ProviderInterface, RateLimitInfo
from .openai import OpenAIProvider

__all__ = [
    "OpenAIProvider",
    "ProviderInterface",
    "RateLimitInfo",
]
