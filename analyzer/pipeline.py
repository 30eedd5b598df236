"""
Two-stage analysis pipeline: scrape with Firecrawl, then score the page.

This is the single place where stage failures become user-facing messages.
Stage 2 only runs after stage 1 succeeds; nothing runs in parallel.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from analyzer.strategies import AnalysisStrategy, get_strategy
from config import Settings
from models import AnalysisOutcome
from utils.clients.firecrawl import FirecrawlClient

logger = logging.getLogger(__name__)

SCRAPE_ERROR_PREFIX = "Failed to scrape website: "
ANALYSIS_ERROR_PREFIX = "AI analysis failed: "

STAGE_INPUT = "input"
STAGE_SCRAPE = "scrape"
STAGE_ANALYSIS = "analysis"


def validate_url(url: Optional[str]) -> Optional[str]:
    """Return an error message if *url* is unusable, else None."""
    if not url or not url.strip():
        return "URL is required"
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return "Invalid URL: could not be parsed"
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return "Invalid URL: must be an absolute http(s) URL"
    return None


class WebsiteAnalyzer:
    """
    Runs one analysis request end to end.

    Args:
        config: Settings, read-only for the lifetime of the analyzer
        scraper: Object with scrape(url) -> ScrapeResult (defaults to Firecrawl)
        strategy: AnalysisStrategy (defaults to the one ANALYSIS_MODE selects)
    """

    def __init__(
        self,
        config: Settings,
        scraper: Optional[FirecrawlClient] = None,
        strategy: Optional[AnalysisStrategy] = None,
    ):
        self.config = config
        self.scraper = scraper or FirecrawlClient(config)
        self.strategy = strategy or get_strategy(config)

    def close(self):
        """Release the provider HTTP clients."""
        self.scraper.close()
        self.strategy.close()

    def run_analysis(self, url: Optional[str]) -> AnalysisOutcome:
        validation_error = validate_url(url)
        if validation_error:
            logger.warning(f"⚠️ Rejected analysis request: {validation_error}")
            return AnalysisOutcome(success=False, error=validation_error, stage=STAGE_INPUT)

        url = url.strip()
        logger.info(f"Starting analysis for: {url}")

        logger.info("Step 1: Scraping website...")
        scrape_result = self.scraper.scrape(url)
        if not scrape_result.success:
            return AnalysisOutcome(
                success=False,
                error=f"{SCRAPE_ERROR_PREFIX}{scrape_result.error}",
                stage=STAGE_SCRAPE,
            )

        logger.info(f"Step 2: Analyzing with {self.strategy.name} strategy...")
        analysis_result = self.strategy.analyze(scrape_result.data)
        if not analysis_result.success:
            return AnalysisOutcome(
                success=False,
                error=f"{ANALYSIS_ERROR_PREFIX}{analysis_result.error}",
                stage=STAGE_ANALYSIS,
            )

        logger.info("✅ Analysis completed successfully")
        return AnalysisOutcome(success=True, data=analysis_result.data)
