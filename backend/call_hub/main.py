"""
AI Voice Translator Hub - Main Application

This is the entry point for the FastAPI application.
It handles:
- Health endpoints
- WebSocket connections for call signaling and live translation
- Startup validation of the translation provider
"""
from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from call_hub.api import router as api_router
from call_hub.api.websocket import router as ws_router
from call_hub.config.constants import APP_NAME, APP_VERSION
from call_hub.config.settings import Settings, settings as default_settings
from call_hub.services.metrics import start_metrics_server
from call_hub.services.protocols import AudioTranslatorProtocol
from call_hub.services.session import CallHub
from call_hub.services.translation import build_translator

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    translator: Optional[AudioTranslatorProtocol] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        translator: Speech translation service; built from settings at startup if omitted
        settings: Configuration; the environment-backed settings if omitted
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Handles startup and shutdown events using the modern FastAPI pattern.
        """
        # === STARTUP ===
        logger.info("🚀 Starting AI Voice Translator Hub...")

        # Missing provider configuration is fatal: refuse to start
        service = translator or build_translator(settings)
        logger.info(f"✅ Translation service ready ({type(service).__name__})")

        app.state.hub = CallHub(service, translation_timeout_sec=settings.TRANSLATION_TIMEOUT_SEC)
        logger.info("✅ Call hub ready")

        if settings.METRICS_ENABLED:
            start_metrics_server(port=settings.METRICS_PORT)

        yield  # Application runs here

        # === SHUTDOWN ===
        logger.info("🛑 Shutting down...")
        await app.state.hub.shutdown()

    app = FastAPI(
        title=APP_NAME,
        description="WebRTC signaling relay with live speech translation",
        version=APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health routes
    app.include_router(api_router)

    # WebSocket routes
    app.include_router(ws_router)

    return app


app = create_app()
