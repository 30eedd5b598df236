"""
Credential checks for the Firecrawl and Anthropic API keys.

Format checks are offline; verify_* functions make one live call to the
provider and report True/False without raising.
"""

import logging
from typing import Dict, List

import anthropic
import requests

from config import Settings
from utils.clients.anthropic import extract_text, get_anthropic_client

logger = logging.getLogger(__name__)

FIRECRAWL_KEY_PREFIX = "fc-"
ANTHROPIC_KEY_PREFIX = "sk-ant-"  # also covers sk-ant-api03-

CONFIGURED = "configured"
MISSING = "missing"
INVALID_FORMAT = "invalid_format"
NOT_REQUIRED = "not_required"

VERIFY_URL = "https://example.com"


def is_valid_firecrawl_key(key: str) -> bool:
    return bool(key) and key.startswith(FIRECRAWL_KEY_PREFIX)


def is_valid_anthropic_key(key: str) -> bool:
    return bool(key) and key.startswith(ANTHROPIC_KEY_PREFIX)


def _key_status(key: str, is_valid) -> str:
    if not key:
        return MISSING
    return CONFIGURED if is_valid(key) else INVALID_FORMAT


def credential_status(config: Settings) -> Dict[str, str]:
    """Presence/format status for each provider key."""
    return {
        "firecrawl_api": _key_status(config.FIRECRAWL_API_KEY, is_valid_firecrawl_key),
        "anthropic_api": _key_status(config.ANTHROPIC_API_KEY, is_valid_anthropic_key),
    }


def startup_warnings(config: Settings) -> List[str]:
    """
    Warnings to log when the service starts.

    In heuristic mode the Anthropic key is not needed, so its absence is not
    reported; a present but malformed key still is.
    """
    status = credential_status(config)
    warnings = []

    if status["firecrawl_api"] == MISSING:
        warnings.append("FIRECRAWL_API_KEY not found in environment variables")
    elif status["firecrawl_api"] == INVALID_FORMAT:
        warnings.append(
            f"FIRECRAWL_API_KEY has an unexpected format (should start with '{FIRECRAWL_KEY_PREFIX}')"
        )

    if status["anthropic_api"] == MISSING:
        if config.requires_anthropic:
            warnings.append("ANTHROPIC_API_KEY not found in environment variables")
    elif status["anthropic_api"] == INVALID_FORMAT:
        warnings.append(
            f"ANTHROPIC_API_KEY has an unexpected format (should start with '{ANTHROPIC_KEY_PREFIX}')"
        )

    return warnings


def verify_anthropic_key(config: Settings, api_key: str) -> bool:
    """Send a short test message; True if Claude answers with text."""
    try:
        client = get_anthropic_client(config, api_key=api_key)
        message = client.messages.create(
            model=config.ANTHROPIC_MODEL,
            max_tokens=100,
            messages=[
                {
                    "role": "user",
                    "content": "Hello, this is a test message. Please respond with 'API key is working'.",
                }
            ],
        )
    except anthropic.APIError as e:
        logger.error(f"❌ Anthropic key verification failed: {type(e).__name__}")
        return False

    return bool(extract_text(message))


def verify_firecrawl_key(config: Settings, api_key: str) -> bool:
    """Scrape a known page; True if Firecrawl reports success."""
    try:
        response = requests.post(
            f"{config.FIRECRAWL_BASE_URL}/scrape",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={"url": VERIFY_URL, "formats": ["markdown"]},
            timeout=config.scrape_request_timeout,
        )
    except requests.RequestException as e:
        logger.error(f"❌ Firecrawl key verification failed: {type(e).__name__}")
        return False

    if not response.ok:
        logger.error(f"❌ Firecrawl key verification failed: HTTP {response.status_code}")
        return False

    try:
        return bool(response.json().get("success"))
    except (ValueError, AttributeError):
        return False
