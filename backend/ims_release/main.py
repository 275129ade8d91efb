"""
IMS Release FastAPI Application
Main entry point for the API
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from ims_release.config import get_settings
from ims_release.core.logging import setup_logging
from ims_release.database import init_db
from ims_release.errors import ImsReleaseError
from ims_release.schemas.common import ErrorResponse
from ims_release.api.v1 import api_router

logger = logging.getLogger(__name__)

settings = get_settings()

JSON_DECODE_ERROR = "JSON format error or missing field detected."
BAD_REQUEST_ERROR = "Bad request."
UNEXPECTED_ERROR = "Unexpected error."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler
    Runs on startup and shutdown
    """
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    Path(settings.IMAGE_DIRECTORY).mkdir(parents=True, exist_ok=True)
    logger.info(f"Page images stored in {settings.IMAGE_DIRECTORY}")

    init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down application")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Scanlation release management: projects, releases, pages and downloadable archives",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Auth-Token", "Content-Type"],
)


# Exception handlers
@app.exception_handler(ImsReleaseError)
async def ims_release_exception_handler(request, exc: ImsReleaseError):
    """Typed API errors carry their own status code and message"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    """Malformed bodies and unparseable path/query values"""
    errors = exc.errors()
    logger.info(f"{request.method} {request.url.path} -> 400: {errors}")
    if any(error.get("loc", ("",))[0] == "body" for error in errors):
        return error_response(400, JSON_DECODE_ERROR)
    return error_response(400, BAD_REQUEST_ERROR)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(500, UNEXPECTED_ERROR)


# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


# Root endpoint
@app.get("/")
def root():
    """Root endpoint"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "api": settings.API_PREFIX or "/"
    }


# Health check
@app.get("/health")
def health_check():
    """Simple health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ims_release.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG
    )
