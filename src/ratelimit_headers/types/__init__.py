# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and header names."""

from .response import ResponseMetadata, normalize_headers, parse_int_header

__all__ = [
    "ResponseMetadata",
    "normalize_headers",
    "parse_int_header",
]
