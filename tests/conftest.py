from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from config import Settings
from models import ScrapedPage, ScrapeResult


def make_settings(**overrides) -> Settings:
    values = {
        "ANTHROPIC_API_KEY": "sk-ant-api03-test",
        "FIRECRAWL_API_KEY": "fc-test",
        "ANALYSIS_MODE": "ai",
        "TRUST_PROVIDER_OVERALL": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def claude_message(text):
    """Shape of an anthropic Message with a single text block."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


@pytest.fixture
def test_settings():
    return make_settings()


@pytest.fixture
def sample_page():
    return ScrapedPage(
        markdown="Sign up free today",
        html="<nav></nav><input/>",
        metadata={},
        source_url="https://example.com",
    )


@pytest.fixture
def ok_scraper(sample_page):
    scraper = MagicMock()
    scraper.scrape.return_value = ScrapeResult.ok(sample_page)
    return scraper
