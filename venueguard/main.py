from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import HTTPException
from dotenv import load_dotenv
import logging
import time
import uvicorn

from venueguard import __version__
from venueguard.core.logging import setup_logging
from venueguard.core.settings import get_settings
from venueguard.api.v1 import venues

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Setup logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Venueguard API", version=__version__)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests_middleware(request: Request, call_next):
    """Log incoming requests, their processing time, and handle unexpected errors."""
    start_time = time.time()
    method = request.method
    path = request.url.path

    # Request bodies carry untrusted venue text, only the path is logged
    logger.info(f"Request: {method} {path}")

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(
            f"Response: {method} {path} - Status: {response.status_code} - Duration: {process_time:.4f}s"
        )
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            f"Error: {method} {path} - Exception: {str(e)} - Duration: {process_time:.4f}s",
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error. Please check logs for more details."},
        )


# Include routers
app.include_router(venues.router, prefix="/api/v1", tags=["venues"])


@app.get("/api/v1", summary="API Welcome", tags=["General"])
async def api_welcome_message():
    """Provides a welcome message and basic API information."""
    return {
        "message": "Welcome to Venueguard API v1",
        "version": app.version,
        "documentation_url": app.docs_url,
        "openapi_url": app.openapi_url,
    }


@app.exception_handler(HTTPException)
async def custom_http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


def run():
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}, environment: {settings.ENVIRONMENT}")

    uvicorn.run(
        "venueguard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.ENVIRONMENT == "development",  # Enable reload only in dev
    )


if __name__ == "__main__":
    run()
