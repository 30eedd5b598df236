"""
Centralized configuration for the Website Growth Analyzer
All environment variables and settings are defined here
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Provides centralized configuration with validation and defaults.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Allow extra env vars in .env file
    )

    # ======================
    # Anthropic Configuration
    # ======================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514",
        description="Claude model to use for analysis"
    )
    MAX_TOKENS: int = Field(default=2000, description="Max tokens for Claude response")
    ANALYSIS_TIMEOUT: int = Field(
        default=60,
        description="Timeout for the Claude request in seconds"
    )

    # ======================
    # Firecrawl Configuration
    # ======================
    FIRECRAWL_API_KEY: str = Field(default="", description="Firecrawl API key")
    FIRECRAWL_BASE_URL: str = Field(
        default="https://api.firecrawl.dev/v1",
        description="Firecrawl REST API base URL"
    )
    SCRAPE_TIMEOUT: int = Field(
        default=30,
        description="Provider-side scrape timeout in seconds"
    )
    SCRAPE_TIMEOUT_GRACE: int = Field(
        default=5,
        description="Extra seconds the HTTP client waits beyond SCRAPE_TIMEOUT"
    )

    # ======================
    # Prompt Configuration
    # ======================
    CONTENT_CHAR_LIMIT: int = Field(
        default=3000,
        description="Characters of page markdown sent to Claude"
    )
    HTML_CHAR_LIMIT: int = Field(
        default=1000,
        description="Characters of page HTML sent to Claude"
    )

    # ======================
    # Analysis Configuration
    # ======================
    ANALYSIS_MODE: Literal["ai", "heuristic"] = Field(
        default="ai",
        description="'ai' scores with Claude, 'heuristic' uses local keyword checks"
    )
    TRUST_PROVIDER_OVERALL: bool = Field(
        default=True,
        description="Use Claude's overall score when valid instead of recomputing it"
    )

    # ======================
    # Service Configuration
    # ======================
    SERVICE_NAME: str = Field(
        default="Website Growth Analyzer API",
        description="Service name reported by the health check"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def scrape_request_timeout(self) -> int:
        """Total seconds the HTTP client waits for a Firecrawl response"""
        return self.SCRAPE_TIMEOUT + self.SCRAPE_TIMEOUT_GRACE

    @property
    def requires_anthropic(self) -> bool:
        """Whether the configured analysis mode needs an Anthropic key"""
        return self.ANALYSIS_MODE == "ai"


# Global settings instance
settings = Settings()


# ======================
# Convenience Functions
# ======================

def get_settings() -> Settings:
    """Get the process-wide settings instance"""
    return settings

