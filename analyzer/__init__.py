# Analyzer package - growth analysis engine
from .heuristics import analyze_heuristically
from .pipeline import WebsiteAnalyzer
from .strategies import AIAnalysisStrategy, HeuristicAnalysisStrategy, get_strategy

__all__ = [
    "analyze_heuristically",
    "WebsiteAnalyzer",
    "AIAnalysisStrategy",
    "HeuristicAnalysisStrategy",
    "get_strategy",
]
