"""SpectraGet — request-parameter validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from spectraget import __version__
from spectraget.api.router import api_router
from spectraget.config import get_settings
from spectraget.logging_config import configure_logging
from spectraget.schemas import get_all_schemas

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG, schemas_path=str(settings.SCHEMAS_PATH))

    # Warm the schema cache so the first request doesn't hit the disk
    schemas = get_all_schemas()
    logger.info("app_started", schemas=schemas)

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="SpectraGet",
    description=(
        "Declarative request-parameter validation. "
        "Checks payloads against flat parameter schemas and reports "
        "the first violation with a 400 status."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle malformed schemas (duplicate names, bad directives)."""
    return JSONResponse(
        status_code=422,
        content={"error": "schema_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "SpectraGet",
        "version": __version__,
        "description": "Declarative request-parameter validation",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("spectraget.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
