"""FastAPI application for the Sales Coach API."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import SalesCoachError
from ...common.exception_handler import format_exception_json, get_http_status_code, log_exception
from .routers import chat, health, training

setup_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

# Shows full stack traces in error responses
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

app = FastAPI(
    title="Sales Coach API",
    description=(
        "AI sales coach. Answers sales questions and scores sales content, "
        "grounded in a library of training documents."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Local dev
        "http://localhost:5173",  # Vite dev server
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(training.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(SalesCoachError)
async def sales_coach_error_handler(request: Request, exc: SalesCoachError) -> JSONResponse:
    """Handle all SalesCoachError exceptions with structured JSON response."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=exc.to_dict(include_trace=DEBUG_MODE),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with structured JSON response."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=format_exception_json(exc, include_trace=DEBUG_MODE),
    )


# Export for uvicorn
__all__ = ["app"]
