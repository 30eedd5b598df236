"""
Analysis strategies: the second stage of the pipeline.

Each strategy takes a ScrapedPage and returns an AnalysisResult. The pipeline
picks one from ANALYSIS_MODE.
"""

import logging
from typing import Optional

from analyzer.heuristics import analyze_heuristically
from config import Settings
from models import AnalysisResult, ScrapedPage
from utils.clients.anthropic import ClaudeGrowthAnalyzer

logger = logging.getLogger(__name__)


class AnalysisStrategy:
    name = "base"

    def analyze(self, page: ScrapedPage) -> AnalysisResult:
        raise NotImplementedError

    def close(self):
        pass


class AIAnalysisStrategy(AnalysisStrategy):
    """Scores the page with Claude."""

    name = "ai"

    def __init__(self, config: Settings, analyzer: Optional[ClaudeGrowthAnalyzer] = None):
        self.analyzer = analyzer or ClaudeGrowthAnalyzer(config)

    def analyze(self, page: ScrapedPage) -> AnalysisResult:
        return self.analyzer.analyze(page)

    def close(self):
        self.analyzer.close()


class HeuristicAnalysisStrategy(AnalysisStrategy):
    """Scores the page locally; never fails."""

    name = "heuristic"

    def analyze(self, page: ScrapedPage) -> AnalysisResult:
        logger.info(f"🔍 Scoring {page.source_url} with local heuristics")
        return AnalysisResult.ok(analyze_heuristically(page))


def get_strategy(config: Settings) -> AnalysisStrategy:
    if config.ANALYSIS_MODE == "heuristic":
        return HeuristicAnalysisStrategy()
    return AIAnalysisStrategy(config)
