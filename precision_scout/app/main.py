"""
Main application module for Precision Scout.

This module initializes the FastAPI application and includes all routes.
It also sets up CORS middleware, request logging and error handlers that
render every failure as {"error": {"code", "message", "type"}}.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import time
from datetime import datetime, timezone

from .routes import company, enrich, lists, saved_searches
from .utils.config import settings
from .utils.logger import configure_loggers
from .utils.logger import app_logger as logger
from .services.redis import redis_service


# Request logging middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging request information and timing."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info(
            f"Incoming request: {request.method} {request.url.path} "
            f"Client: {request.client.host if request.client else 'unknown'}"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"Error: {str(e)} "
                f"Duration: {time.time() - start_time:.3f}s"
            )
            raise

        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Duration: {time.time() - start_time:.3f}s"
        )
        return response


def error_response(code: int, message, error_type: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content={"error": {"code": code, "message": message, "type": error_type}},
        headers=headers,
    )


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Precision Scout API

    Key Features:
    - Company search, lists and saved searches
    - Website enrichment with thesis-fit scoring
    """,
    version=settings.VERSION,
)

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(enrich.router, prefix="/api/enrich")
app.include_router(company.router, prefix="/api/companies")
app.include_router(lists.router, prefix="/api/lists")
app.include_router(saved_searches.router, prefix="/api/saved-searches")


# Custom exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with detailed error responses."""
    logger.error(f"HTTP error: {exc.status_code} - {exc.detail}")
    return error_response(exc.status_code, exc.detail, "http_error", getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc) -> JSONResponse:
    """Handle request and model validation failures."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors, "validation_error")


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        "internal_error",
    )


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "documentation": "/docs",
        "health": "/health"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with Redis and enrichment mode status."""
    redis_status = await redis_service.ping()

    return {
        "status": "healthy" if redis_status else "degraded",
        "version": settings.VERSION,
        "components": {
            "redis": {
                "status": "connected" if redis_status else "disconnected"
            },
            "enrichment": {
                "mode": "mock" if settings.mock_enrichment else "live",
                "model": settings.OPENAI_MODEL,
            },
            "api": {
                "status": "active",
                "environment": settings.ENVIRONMENT,
            }
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """Initialize application services on startup."""
    configure_loggers(settings.LOGS_DIR)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")

    if settings.mock_enrichment:
        logger.warning("OPENAI_API_KEY not set, enrichment runs in mock mode")

    if await redis_service.ping():
        logger.info("Successfully connected to Redis")
    else:
        logger.warning("Redis unavailable, enrichment results will not be cached")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup application services on shutdown."""
    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await redis_service.close()


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("precision_scout.app.main:app", host="0.0.0.0", port=8000, reload=True)
