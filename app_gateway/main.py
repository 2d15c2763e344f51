"""
MAIN FASTAPI APPLICATION ENTRY POINT
====================================
This module initializes and configures the FastAPI application,
including the upgrade rules router, middleware, and health checks.

Architecture:
- FastAPI Gateway serves as the HTTP entry point for upgrade path checks
- Upgrade orchestrators call it before initiating a rolling upgrade
- Handles CORS for frontend communication
"""

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app_gateway.api.routers import upgrade_rules

from .core.config import settings

# =============================================================================
# FASTAPI APPLICATION INITIALIZATION
# =============================================================================
app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    description="API Gateway for deployment upgrade path validation.",
    # OpenAPI documentation will be available at /docs and /redoc by default.
)

# =============================================================================
# CORS MIDDLEWARE CONFIGURATION
# =============================================================================
# When allow_credentials is True, 'allow_origins' CANNOT be ["*"].
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# ROUTER REGISTRATION
# =============================================================================
# upgrade_rules_router defines its own /api/operations/upgrade-rules prefix.
# Do NOT add an additional prefix here to avoid duplicating it.
app.include_router(upgrade_rules.upgrade_rules_router)
logger.info("✅ Registered 'upgrade_rules_router' (upgrade path validation)")
logger.info(
    "   📍 Endpoints: POST /api/operations/upgrade-rules/check, "
    "GET /api/operations/upgrade-rules/min-patch"
)


# =============================================================================
# HEALTH CHECK ENDPOINTS
# =============================================================================
@app.get("/")
def root_health_check():
    """
    🏠 ROOT ENDPOINT: Basic service status for fundamental connectivity checks.

    Returns:
        dict: A simple status object indicating the gateway is operational.
    """
    logger.debug("Received request to root health check '/'")
    return {
        "status": "ok",
        "message": "Upgrade Rules Gateway is operational",
        "version": settings.APP_VERSION,
    }


@app.get("/health")
def health_check():
    """
    ❤️ HEALTH CHECK: Service health status for readiness probes.

    Returns:
        dict: A detailed health report including the configured minor policy.
    """
    logger.debug("Received request to comprehensive health check '/health'")
    return {
        "status": "healthy",
        "service": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "default_minor_policy": upgrade_rules.default_minor_policy().value,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


logger.info("🚀 FastAPI application initialization complete. Gateway is ready to serve requests.")
