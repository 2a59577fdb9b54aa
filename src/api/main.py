"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit logging, security headers, CORS)
4. Exception handlers mapping service errors to the response envelope
5. Startup/shutdown events

Run with: uvicorn src.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.logging_config import setup_logging, get_logger
from src.core.exceptions import BFHLException
from src.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from src.api.routes import bfhl_router, health_router
from src.models.bfhl import BFHLResponse


APP_VERSION = "1.0.0"

# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, log_to_file=settings.log_to_file)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup. There is nothing to
    clean up on shutdown: the service holds no connections or state.
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"Gemini Model: {settings.gemini_model}")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")
    if not settings.has_gemini_key():
        logger.warning("GEMINI_API_KEY is not set; AI requests will fail")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="BFHL API",
    description="""
    Arithmetic utilities and a single-word AI answer service.

    ## Operations (POST /bfhl)

    - **fibonacci**: first n Fibonacci numbers
    - **prime**: primes in an integer array
    - **lcm**: least common multiple of an integer array
    - **hcf**: highest common factor of an integer array
    - **AI**: one-word answer to a question, via Google Gemini
    """,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(SecurityHeadersMiddleware)

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.warning("CORS configured for development (all origins allowed)")


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(BFHLException)
async def bfhl_exception_handler(request: Request, exc: BFHLException):
    """Handle all service exceptions with the failure envelope."""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    else:
        logger.info(f"Rejected request: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=BFHLResponse.failure(get_settings().official_email, exc.message).to_content(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    The client gets the exception message only, never the traceback.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content=BFHLResponse.failure(get_settings().official_email, str(exc)).to_content(),
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(bfhl_router)


@app.get("/", include_in_schema=False)
async def root():
    """Describe the service and where to go next."""
    return {
        "message": "BFHL API",
        "version": APP_VERSION,
        "documentation": "/docs",
        "health": "/health",
        "endpoint": "/bfhl",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
    )
