"""
Website Growth Analyzer - Main Application

A FastAPI backend service that scrapes a website with Firecrawl and asks
Claude AI (Anthropic) to score it on onboarding, UX and growth-loop criteria.
A local heuristic scorer can stand in for Claude (ANALYSIS_MODE=heuristic).
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import settings
from routes import close_website_analyzer, router
from utils.validation.credentials import startup_warnings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 {settings.SERVICE_NAME} starting (analysis mode: {settings.ANALYSIS_MODE})")
    for warning in startup_warnings(settings):
        logger.warning(f"⚠️  {warning}")
    yield
    close_website_analyzer()


# Initialize FastAPI app
app = FastAPI(title="Website Growth Analyzer", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500, content={"success": False, "error": "Something went wrong!"}
    )


# Include all routes from routes.py
app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, timeout_keep_alive=60)
