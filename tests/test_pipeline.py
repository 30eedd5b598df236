from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from analyzer.pipeline import (
    ANALYSIS_ERROR_PREFIX,
    SCRAPE_ERROR_PREFIX,
    WebsiteAnalyzer,
    validate_url,
)
from analyzer.strategies import AIAnalysisStrategy, HeuristicAnalysisStrategy, get_strategy
from models import AnalysisResult, ScrapeResult
from tests.conftest import make_settings
from utils.clients.anthropic import ClaudeGrowthAnalyzer
from utils.parsing.json import fallback_analysis


def failing_strategy(error):
    strategy = MagicMock()
    strategy.name = "fake"
    strategy.analyze.return_value = AnalysisResult.fail(error)
    return strategy


def test_scrape_failure_skips_analysis(test_settings):
    scraper = MagicMock()
    scraper.scrape.return_value = ScrapeResult.fail("Request failed with status 403")
    strategy = MagicMock()

    outcome = WebsiteAnalyzer(test_settings, scraper, strategy).run_analysis("https://example.com")

    assert not outcome.success
    assert outcome.data is None
    assert outcome.error == "Failed to scrape website: Request failed with status 403"
    assert outcome.error.startswith(SCRAPE_ERROR_PREFIX)
    assert outcome.stage == "scrape"
    strategy.analyze.assert_not_called()


def test_analysis_failure_is_prefixed(test_settings, ok_scraper):
    strategy = failing_strategy("No analysis content received from AI")

    outcome = WebsiteAnalyzer(test_settings, ok_scraper, strategy).run_analysis("https://example.com")

    assert not outcome.success
    assert outcome.error.startswith(ANALYSIS_ERROR_PREFIX)
    assert outcome.stage == "analysis"


def test_rate_limited_claude_call(test_settings, ok_scraper):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    client = MagicMock()
    client.messages.create.side_effect = anthropic.RateLimitError(
        "rate limited", response=httpx.Response(429, request=request), body=None
    )
    strategy = AIAnalysisStrategy(
        test_settings, analyzer=ClaudeGrowthAnalyzer(test_settings, client=client)
    )

    outcome = WebsiteAnalyzer(test_settings, ok_scraper, strategy).run_analysis("https://example.com")

    assert outcome.success is False
    assert outcome.data is None
    assert outcome.error == "AI analysis failed: API request failed: 429"


def test_successful_run_with_heuristics(test_settings, ok_scraper, sample_page):
    outcome = WebsiteAnalyzer(
        test_settings, ok_scraper, HeuristicAnalysisStrategy()
    ).run_analysis("  https://example.com  ")

    assert outcome.success
    assert outcome.error is None
    assert outcome.data.overall.score == 57
    ok_scraper.scrape.assert_called_once_with("https://example.com")


def test_strategy_receives_scraped_page(test_settings, ok_scraper, sample_page):
    strategy = MagicMock()
    strategy.analyze.return_value = AnalysisResult.ok(fallback_analysis())

    WebsiteAnalyzer(test_settings, ok_scraper, strategy).run_analysis("https://example.com")

    strategy.analyze.assert_called_once_with(sample_page)


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url_is_rejected_before_scraping(test_settings, ok_scraper, url):
    outcome = WebsiteAnalyzer(test_settings, ok_scraper, MagicMock()).run_analysis(url)

    assert outcome.error == "URL is required"
    assert outcome.stage == "input"
    ok_scraper.scrape.assert_not_called()


@pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "https://", "http://[::1"])
def test_invalid_url_is_rejected(url):
    assert validate_url(url).startswith("Invalid URL")


def test_valid_url_passes():
    assert validate_url("https://example.com/pricing?plan=pro") is None


def test_missing_firecrawl_key_fails_scrape_stage():
    config = make_settings(FIRECRAWL_API_KEY="")
    strategy = MagicMock()

    outcome = WebsiteAnalyzer(config, strategy=strategy).run_analysis("https://example.com")

    assert outcome.error == "Failed to scrape website: Firecrawl API key not found"
    strategy.analyze.assert_not_called()


def test_strategy_selected_from_mode():
    assert isinstance(get_strategy(make_settings(ANALYSIS_MODE="ai")), AIAnalysisStrategy)
    assert isinstance(
        get_strategy(make_settings(ANALYSIS_MODE="heuristic")), HeuristicAnalysisStrategy
    )


def test_close_releases_scraper_and_strategy(test_settings):
    scraper, strategy = MagicMock(), MagicMock()

    WebsiteAnalyzer(test_settings, scraper, strategy).close()

    scraper.close.assert_called_once_with()
    strategy.close.assert_called_once_with()
