"""
API module.

HTTP health routes and the WebSocket router for real-time call communication.
"""
from datetime import datetime, UTC

from fastapi import APIRouter, Request

from call_hub.config.constants import APP_NAME, APP_VERSION

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running"
    }


@router.get("/health")
async def health(request: Request):
    """Health check endpoint."""
    hub = request.app.state.hub
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "connected_clients": len(hub.registry),
        "pending_translations": hub.translation.pending,
    }
