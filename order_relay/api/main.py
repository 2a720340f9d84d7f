"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_relay.api.endpoints import orders_router
from order_relay.integrations.telegram import drain_pending_confirmations
from order_relay.utils.config_loader import get_notifier_settings

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Storefront Order Relay API"
SERVICE_VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Validates storefront orders and relays them to a Telegram chat",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_notifier_settings().config.server.allowed_origins,
    allow_credentials=False,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(orders_router, prefix="/api")


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": SERVICE_NAME, "status": "healthy", "version": SERVICE_VERSION, "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {"status": "healthy", "service": SERVICE_NAME, "timestamp": datetime.now().isoformat()}


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting %s...", SERVICE_NAME)
    settings = get_notifier_settings()
    if not settings.has_credentials:
        logger.warning("Telegram credentials are not configured; order submissions will fail with SERVER_CONFIG_ERROR")


@app.on_event("shutdown")
async def shutdown_event():
    """Wait for confirmation replies still in flight"""
    drained = await drain_pending_confirmations()
    logger.info("Shutting down %s (%d confirmation(s) drained)...", SERVICE_NAME, drained)
