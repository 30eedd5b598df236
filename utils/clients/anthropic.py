"""
Anthropic API client utilities for the Website Growth Analyzer.

This module sends the growth-analysis prompt to Claude and turns the reply
into a WebsiteAnalysis. It is a one-shot, stateless call: no history, no
streaming, and no retries (the SDK's built-in retries are disabled).
"""

import logging
from typing import Optional

import anthropic

from analysis_prompt import get_growth_prompt
from config import Settings, settings as default_settings
from models import AnalysisResult, ScrapedPage
from utils.parsing.json import parse_analysis_response

logger = logging.getLogger(__name__)


def get_anthropic_client(config: Optional[Settings] = None, api_key: Optional[str] = None):
    """Create an Anthropic client bounded by ANALYSIS_TIMEOUT with retries disabled."""
    config = config or default_settings
    return anthropic.Anthropic(
        api_key=api_key if api_key is not None else config.ANTHROPIC_API_KEY,
        timeout=config.ANALYSIS_TIMEOUT,
        max_retries=0,
    )


def extract_text(message) -> str:
    """Return the first text block of a Claude message, or an empty string."""
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", None) == "text" and getattr(block, "text", None):
            return block.text
    return ""


class ClaudeGrowthAnalyzer:
    """
    Scores a scraped page on onboarding, UX and growth with Claude.
    """

    def __init__(self, config: Optional[Settings] = None, client=None):
        self.config = config or default_settings
        self._client = client

    @property
    def client(self):
        # Lazy initialization so a missing key is reported, not raised at import
        if self._client is None:
            self._client = get_anthropic_client(self.config)
        return self._client

    def close(self):
        if self._client is not None:
            self._client.close()

    def call_anthropic_api(self, prompt: str, max_tokens: Optional[int] = None):
        return self.client.messages.create(
            model=self.config.ANTHROPIC_MODEL,
            max_tokens=max_tokens or self.config.MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
        )

    def analyze(self, page: ScrapedPage) -> AnalysisResult:
        """
        Analyze *page* with Claude.

        Returns:
            AnalysisResult with a WebsiteAnalysis on success. Provider
            rejections, transport failures and empty replies come back as
            failures; malformed JSON does not (it degrades to a fallback).
        """
        if self._client is None and not self.config.ANTHROPIC_API_KEY:
            logger.error("❌ Anthropic API key not configured")
            return AnalysisResult.fail("Anthropic API key not found")

        prompt = get_growth_prompt(
            page,
            content_limit=self.config.CONTENT_CHAR_LIMIT,
            html_limit=self.config.HTML_CHAR_LIMIT,
        )

        logger.info(f"🤖 Analyzing {page.source_url} with Claude AI...")
        try:
            message = self.call_anthropic_api(prompt)
        except anthropic.APIStatusError as e:
            logger.error(f"❌ Anthropic API error: {e.status_code} {str(e)}")
            return AnalysisResult.fail(f"API request failed: {e.status_code}")
        except anthropic.APITimeoutError:
            logger.error(
                f"⏱️ Anthropic request timed out after {self.config.ANALYSIS_TIMEOUT}s"
            )
            return AnalysisResult.fail(
                f"API request timed out after {self.config.ANALYSIS_TIMEOUT}s"
            )
        except anthropic.APIConnectionError as e:
            logger.error(f"❌ Anthropic connection failed: {str(e)}")
            return AnalysisResult.fail(f"Connection error: {str(e)}")
        except anthropic.APIError as e:
            logger.error(f"❌ Anthropic API error: {type(e).__name__}: {str(e)}")
            return AnalysisResult.fail(f"Unexpected API error: {type(e).__name__}")

        analysis_text = extract_text(message)
        if not analysis_text:
            logger.error("❌ Claude returned no text content")
            return AnalysisResult.fail("No analysis content received from AI")

        logger.info("🔧 Parsing Claude response...")
        analysis = parse_analysis_response(
            analysis_text, trust_provider_overall=self.config.TRUST_PROVIDER_OVERALL
        )
        logger.info(f"✅ Claude analysis complete (overall score {analysis.overall.score})")
        return AnalysisResult.ok(analysis)
