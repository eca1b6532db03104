"""Sculpture Radar FastAPI Application.

Main entry point for the backend API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from sculpture_radar.api import router
from sculpture_radar.api.routes import get_catalog, get_settings
from sculpture_radar.models import ErrorCode, RadarError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and the catalog before serving requests."""
    settings = get_settings()
    get_catalog()
    if not settings.gateway.api_key:
        logger.warning(
            f"[STARTUP] No API key for provider {settings.gateway.provider!r}; "
            "AI calls will fail with CONFIGURATION_ERROR"
        )
    yield


app = FastAPI(
    title="Sculpture Radar API",
    description="Find sculpture parks and outdoor art near any place",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_content(code: ErrorCode, message: str, user_message: str) -> dict:
    return {
        "success": False,
        "error": {"code": code.value, "message": message, "user_message": user_message},
    }


# Global exception handlers
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=422,
        content=_error_content(
            ErrorCode.VALIDATION_ERROR,
            f"{exc.error_count()} validation error(s)",
            "Invalid request format. Please check your input.",
        ),
    )


@app.exception_handler(RadarError)
async def radar_exception_handler(request: Request, exc: RadarError):
    """Classified failures that escaped a route."""
    logger.warning(f"[API] {exc.code.value} on {request.url.path}: {exc.message}")
    error = exc.to_app_error()
    return JSONResponse(
        status_code=503,
        content=_error_content(error.code, f"{exc.__class__.__name__} on {request.url.path}", error.user_message),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors. The exception text is logged, never returned."""
    logger.exception(f"[API] Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=_error_content(
            ErrorCode.API_ERROR,
            "Internal server error",
            "Something went wrong. Please try again.",
        ),
    )


# Include API routes
app.include_router(router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
