"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (auth, receipts) and health endpoints
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.redis_client import connect_to_redis, close_redis_connection, check_redis_health
from app.api import auth, receipts
from app.schemas.response import ServiceInfo
from utils.constants import GOODBYE_BODY, HEALTH_BODY

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

VERSION = "1.0.0"

ENDPOINTS = [
    "GET / - This help message",
    "GET /health - Health check",
    "GET /goodbyeworld - Returns a goodbye message",
    "GET /ready - Readiness probe",
    "POST /auth/send-code - Send a verification code by SMS",
    "POST /auth/verify - Verify a code and log in",
    "GET /auth/me - Current user",
    "POST /receipts - Create a receipt",
    "GET /receipts - List receipts",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("🚀 Starting phone verification service...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        # Fails startup once the retries are exhausted
        await connect_to_redis()

        logger.info(f"🎉 Service started on port {settings.PORT}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug Mode: {settings.DEBUG}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("🛑 Shutting down phone verification service...")

    try:
        await close_redis_connection()
        logger.info("👋 Service shut down successfully")

    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


app = FastAPI(
    title="Phone Verification API",
    description="Phone-number verification, session tokens and receipts over Redis",
    version=VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,  # Disable docs in production
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if process_time > 2.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path} ({process_time:.2f}s)"
        )

    return response


app.include_router(auth.router, tags=["Auth"])
app.include_router(receipts.router, tags=["Receipts"])


@app.get("/", tags=["Health"], response_model=ServiceInfo)
async def root():
    """Root endpoint - basic info and available endpoints."""
    return ServiceInfo(
        name="Phone Verification API",
        version=VERSION,
        environment=settings.ENVIRONMENT,
        endpoints=ENDPOINTS,
    )


@app.get("/health", tags=["Health"], response_class=PlainTextResponse)
async def health_check():
    """Returns the health status of the API."""
    return HEALTH_BODY


@app.get("/goodbyeworld", tags=["Health"], response_class=PlainTextResponse)
async def goodbye_world():
    """Returns a goodbye message."""
    return GOODBYE_BODY


# Readiness probe (for Kubernetes/orchestration)
@app.get("/ready", tags=["Health"])
async def readiness_check():
    """
    Readiness probe - indicates if Redis is reachable.
    """
    if await check_redis_health():
        return {"status": "ready"}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "redis_unavailable"}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
