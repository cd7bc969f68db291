from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import local modules
from config import (
    ENVIRONMENT,
    FRONTEND_URL,
    RECORD_SOURCE,
    FETCH_ADVOCATES_MSG_ERROR,
    INTERNAL_SERVER_MSG_ERROR,
)
from records import RecordSourceError, load_advocates
from routers import advocates_router, health_router

# ==============================================================================
# LOGGING CONFIGURATION
# ==============================================================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ==============================================================================
# STARTUP & SHUTDOWN
# ==============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm the record collection on startup"""
    logger.info(f"Application starting in {ENVIRONMENT} mode")
    logger.info(f"Record source: {RECORD_SOURCE}")

    try:
        records = load_advocates()
        logger.info(f"Record source ready with {len(records)} advocates")
    except RecordSourceError as exc:
        logger.warning(f"Record source unavailable at startup: {exc}")

    yield

    logger.info("Application shutting down")

# ==============================================================================
# APPLICATION SETUP
# ==============================================================================

app = FastAPI(
    title="Advocate Directory API",
    description="Search, filter, sort and paginate the advocate directory",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ==============================================================================
# MIDDLEWARE
# ==============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log all incoming requests and their processing time.
    """
    start_time = time.time()

    logger.info(
        f"{request.method} {request.url.path} "
        f"from {request.client.host if request.client else 'unknown'}"
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"completed in {process_time:.3f}s "
        f"with status {response.status_code}"
    )

    response.headers["X-Process-Time"] = str(process_time)

    return response

# CORS Configuration
if ENVIRONMENT == "production":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_URL],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )
    logger.info(f"CORS enabled for production: {FRONTEND_URL}")
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "https://localhost:3000",
            "https://127.0.0.1:3000"
        ],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )
    logger.info("CORS enabled for development")

# ==============================================================================
# ERROR HANDLERS
# ==============================================================================

@app.exception_handler(RecordSourceError)
async def record_source_error_handler(request: Request, exc: RecordSourceError):
    """The advocate collection could not be loaded"""
    logger.error(f"Error fetching advocates: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": FETCH_ADVOCATES_MSG_ERROR}
    )

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Anything else becomes a generic error body"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_SERVER_MSG_ERROR}
    )

# ==============================================================================
# ROUTERS
# ==============================================================================

app.include_router(health_router)
app.include_router(advocates_router)
