import math
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, not to even."""
    return int(math.floor(value + 0.5))


def mean_score(*scores: float) -> int:
    return round_half_up(sum(scores) / len(scores))


# Scraped content
class ScrapedPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    markdown: str = ""
    html: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)
    source_url: str


# Analysis result
class CategoryScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class OverallScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    summary: str = Field(min_length=1)


class WebsiteAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    onboarding: CategoryScore
    ux: CategoryScore
    growth: CategoryScore
    overall: OverallScore


# Partially-parsed Claude output, before defaults are applied
class PartialCategoryScore(BaseModel):
    score: Optional[float] = None
    issues: Optional[List[str]] = None
    suggestions: Optional[List[str]] = None


class PartialOverallScore(BaseModel):
    score: Optional[float] = None
    summary: Optional[str] = None


class PartialAnalysis(BaseModel):
    onboarding: PartialCategoryScore = Field(default_factory=PartialCategoryScore)
    ux: PartialCategoryScore = Field(default_factory=PartialCategoryScore)
    growth: PartialCategoryScore = Field(default_factory=PartialCategoryScore)
    overall: PartialOverallScore = Field(default_factory=PartialOverallScore)


# Stage results returned by the scraper and analysis layers
class StageResult(BaseModel):
    success: bool
    error: Optional[str] = None


class ScrapeResult(StageResult):
    data: Optional[ScrapedPage] = None

    @classmethod
    def ok(cls, page: ScrapedPage) -> "ScrapeResult":
        return cls(success=True, data=page)

    @classmethod
    def fail(cls, error: str) -> "ScrapeResult":
        return cls(success=False, error=error)


class AnalysisResult(StageResult):
    data: Optional[WebsiteAnalysis] = None

    @classmethod
    def ok(cls, analysis: WebsiteAnalysis) -> "AnalysisResult":
        return cls(success=True, data=analysis)

    @classmethod
    def fail(cls, error: str) -> "AnalysisResult":
        return cls(success=False, error=error)


class AnalysisOutcome(BaseModel):
    """Envelope returned by the pipeline. `stage` names where a failure happened."""

    success: bool
    data: Optional[WebsiteAnalysis] = None
    error: Optional[str] = None
    stage: Optional[str] = None


# HTTP models
class AnalyzeRequest(BaseModel):
    url: Optional[str] = None


class AnalyzeResponseData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    analysis: WebsiteAnalysis
    scraped_at: str = Field(alias="scrapedAt")


class AnalyzeResponse(BaseModel):
    success: bool = True
    data: AnalyzeResponseData


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str
