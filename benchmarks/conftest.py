"""
Shared fixtures for benchmark tests.
"""

import random

import pytest

from ratelimit_headers.config import HeaderParsingConfig
from ratelimit_headers.providers import OpenAIProvider


def random_timestamp(rng: random.Random) -> str:
    """Build a compact duration with a random subset of segments."""
    parts = []
    if rng.random() < 0.2:
        parts.append(f"{rng.randint(0, 23)}h")
    if rng.random() < 0.6:
        parts.append(f"{rng.randint(0, 59)}m")
    if rng.random() < 0.8:
        parts.append(f"{rng.randint(0, 59)}s")
    if rng.random() < 0.7:
        parts.append(f"{rng.randint(0, 999)}ms")
    return "".join(parts)


@pytest.fixture
def timestamps():
    """100k reproducible random timestamps."""
    rng = random.Random(1234)
    return [random_timestamp(rng) for _ in range(100_000)]


@pytest.fixture
def benchmark_headers():
    """A full set of OpenAI rate limit headers."""
    return {
        "x-request-id": "req_bench",
        "x-ratelimit-limit-requests": "10000",
        "x-ratelimit-limit-tokens": "2000000",
        "x-ratelimit-remaining-requests": "9999",
        "x-ratelimit-remaining-tokens": "1999950",
        "x-ratelimit-reset-requests": "6ms",
        "x-ratelimit-reset-tokens": "6m45s99ms",
    }


@pytest.fixture
def benchmark_provider():
    """Provider with the default configuration."""
    return OpenAIProvider(HeaderParsingConfig())
