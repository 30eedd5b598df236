# Clients subpackage - External API clients
from .anthropic import ClaudeGrowthAnalyzer, get_anthropic_client
from .firecrawl import FirecrawlClient

__all__ = [
    "ClaudeGrowthAnalyzer",
    "get_anthropic_client",
    "FirecrawlClient",
]
