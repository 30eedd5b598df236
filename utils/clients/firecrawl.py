"""
Firecrawl API client for the Website Growth Analyzer.

Scrapes a single URL through the Firecrawl /scrape endpoint and returns the
page markdown, HTML and metadata. Failures are returned as a ScrapeResult,
never raised. No retries: one failed attempt is reported immediately.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from config import Settings, settings as default_settings
from models import ScrapedPage, ScrapeResult

logger = logging.getLogger(__name__)

# Tags kept by Firecrawl when building the page content
INCLUDE_TAGS = ["title", "meta", "h1", "h2", "h3", "a", "button", "form", "input"]

UNEXPECTED_RESPONSE = "Unexpected response from Firecrawl"


class FirecrawlClient:
    """Thin wrapper around the Firecrawl REST API."""

    def __init__(self, config: Optional[Settings] = None, session=None):
        self.config = config or default_settings
        self.session = session or requests.Session()

    def close(self):
        self.session.close()

    @property
    def api_key(self) -> str:
        return self.config.FIRECRAWL_API_KEY

    def build_payload(self, url: str) -> dict:
        return {
            "url": url,
            "formats": ["markdown", "html"],
            "includeTags": INCLUDE_TAGS,
            "onlyMainContent": True,
            "timeout": self.config.SCRAPE_TIMEOUT * 1000,
        }

    def scrape(self, url: str) -> ScrapeResult:
        """
        Scrape *url* with Firecrawl.

        Returns:
            ScrapeResult holding a ScrapedPage on success, or the provider or
            transport error message on failure.
        """
        if not self.api_key:
            logger.error("❌ Firecrawl API key not configured")
            return ScrapeResult.fail("Firecrawl API key not found")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"📡 Scraping website: {url}")
        try:
            response = self.session.post(
                f"{self.config.FIRECRAWL_BASE_URL}/scrape",
                headers=headers,
                json=self.build_payload(url),
                timeout=self.config.scrape_request_timeout,
            )
        except requests.Timeout:
            logger.error(f"⏱️ Firecrawl request timed out for {url}")
            return ScrapeResult.fail(
                f"Scrape timed out after {self.config.SCRAPE_TIMEOUT}s"
            )
        except requests.RequestException as e:
            logger.error(f"❌ Firecrawl request failed for {url}: {str(e)}")
            return ScrapeResult.fail(str(e) or "Failed to scrape website")

        body = _json_or_none(response)

        if not response.ok:
            provider_error = _provider_error(body)
            logger.error(
                f"❌ Firecrawl scrape failed: HTTP {response.status_code} {provider_error or ''}"
            )
            return ScrapeResult.fail(
                provider_error or f"Request failed with status {response.status_code}"
            )

        if not isinstance(body, dict) or not body.get("success"):
            provider_error = _provider_error(body)
            logger.error(f"❌ Firecrawl scrape failed: {provider_error}")
            return ScrapeResult.fail(provider_error or "Failed to scrape website")

        data = body.get("data") or {}
        if not isinstance(data, dict):
            logger.error(f"❌ Firecrawl returned data of type {type(data).__name__}")
            return ScrapeResult.fail(UNEXPECTED_RESPONSE)

        try:
            page = ScrapedPage(
                markdown=data.get("markdown") or "",
                html=data.get("html") or "",
                metadata=data.get("metadata") or {},
                source_url=url,
            )
        except ValidationError as e:
            logger.error(f"❌ Firecrawl returned malformed page fields: {e.error_count()} errors")
            return ScrapeResult.fail(UNEXPECTED_RESPONSE)

        logger.info(
            f"✅ Firecrawl scrape successful ({len(page.markdown)} chars markdown, {len(page.html)} chars html)"
        )
        return ScrapeResult.ok(page)


def _provider_error(body) -> Optional[str]:
    error = body.get("error") if isinstance(body, dict) else None
    if not error:
        return None
    return error if isinstance(error, str) else str(error)


def _json_or_none(response):
    try:
        return response.json()
    except ValueError:
        return None
