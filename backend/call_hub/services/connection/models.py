"""
Connection Models

Data classes representing connected WebSocket clients.
"""
import asyncio
from datetime import datetime, UTC
import logging

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from call_hub.config.constants import DEFAULT_LANGUAGE, Language

logger = logging.getLogger(__name__)


class ClientSession:
    """Represents a single connected client and its mutable state."""

    def __init__(
        self,
        websocket: WebSocket,
        client_id: str,
        language: Language = DEFAULT_LANGUAGE,
    ):
        self.websocket = websocket
        self.id = client_id
        self.language = language
        self.connected_at = datetime.now(UTC)
        # Serializes translation of this client's audio chunks
        self.translation_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_text(self, data: str) -> bool:
        """Send an already serialized frame to this connection."""
        try:
            await self.websocket.send_text(data)
            return True
        except Exception as e:
            logger.error(f"Error sending to {self.id}: {e}")
            return False

    def __repr__(self) -> str:
        return f"ClientSession(id={self.id!r}, language={self.language.value!r})"
