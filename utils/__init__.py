# Utils package - Utility modules organized by domain
# Import from subpackages for convenience

from .clients.anthropic import ClaudeGrowthAnalyzer
from .clients.firecrawl import FirecrawlClient
from .parsing.json import parse_analysis_response

__all__ = [
    "ClaudeGrowthAnalyzer",
    "FirecrawlClient",
    "parse_analysis_response",
]
