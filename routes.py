from datetime import datetime, timezone
from functools import lru_cache
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from analyzer.pipeline import STAGE_ANALYSIS, WebsiteAnalyzer
from config import Settings, get_settings
from models import AnalyzeResponse, AnalyzeResponseData, ErrorResponse, HealthResponse
from utils.validation.credentials import CONFIGURED, NOT_REQUIRED, credential_status

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@lru_cache(maxsize=1)
def get_website_analyzer() -> WebsiteAnalyzer:
    """One analyzer per process so provider connections are pooled and reused."""
    return WebsiteAnalyzer(get_settings())


def close_website_analyzer():
    if get_website_analyzer.cache_info().currsize:
        get_website_analyzer().close()
        get_website_analyzer.cache_clear()


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=error).model_dump()
    )


@router.get("/")
async def root(config: Settings = Depends(get_settings)):
    return {
        "service": config.SERVICE_NAME,
        "status": "running",
        "endpoints": {
            "analyze": "/api/analyze (POST)",
            "health": "/health (GET)",
            "status": "/status/detailed (GET)",
        },
    }


@router.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_website(
    request: Request, analyzer: WebsiteAnalyzer = Depends(get_website_analyzer)
):
    """
    Scrapes a website and scores it on onboarding, UX and growth.

    Body: {"url": "https://example.com"}

    Returns 400 when the URL is missing/invalid or the scrape fails, 500 when
    the analysis stage fails.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    url = body.get("url") if isinstance(body, dict) else None
    if not isinstance(url, str) or not url.strip():
        return error_response(400, "URL is required")

    try:
        # Provider calls block, so keep them off the event loop
        outcome = await run_in_threadpool(analyzer.run_analysis, url)
    except Exception:
        logger.exception(f"❌ Unexpected failure while analyzing {url}")
        return error_response(500, "Internal server error")

    if not outcome.success:
        status_code = 500 if outcome.stage == STAGE_ANALYSIS else 400
        logger.error(f"❌ Analysis of {url} failed ({outcome.stage}): {outcome.error}")
        return error_response(status_code, outcome.error)

    return AnalyzeResponse(
        data=AnalyzeResponseData(
            url=url.strip(), analysis=outcome.data, scraped_at=utc_timestamp()
        )
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(config: Settings = Depends(get_settings)):
    return HealthResponse(
        status="healthy", timestamp=utc_timestamp(), service=config.SERVICE_NAME
    )


@router.get("/status/detailed")
async def detailed_status_check(config: Settings = Depends(get_settings)):
    """
    Configuration health: analysis mode and provider credential status.

    Never calls the providers; see scripts/validate_system.py for live checks.
    """
    credentials = credential_status(config)
    if not config.requires_anthropic:
        credentials["anthropic_api"] = NOT_REQUIRED

    status_info = {
        "api": "healthy",
        "analysis_mode": config.ANALYSIS_MODE,
        **credentials,
    }

    if any(value not in (CONFIGURED, NOT_REQUIRED) for value in credentials.values()):
        status_info["overall_status"] = "degraded"
    else:
        status_info["overall_status"] = "healthy"

    return status_info
