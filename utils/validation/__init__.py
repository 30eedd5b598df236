"""
Validation Package for the Website Growth Analyzer

This package checks that the Firecrawl and Anthropic credentials are present
and well-formed, and can verify them against the live providers.

Modules:
- credentials: key format checks, startup warnings, live verification
"""

from .credentials import (
    credential_status,
    startup_warnings,
    verify_anthropic_key,
    verify_firecrawl_key,
)

__all__ = [
    "credential_status",
    "startup_warnings",
    "verify_anthropic_key",
    "verify_firecrawl_key",
]
