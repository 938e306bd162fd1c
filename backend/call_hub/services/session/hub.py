"""
Call Hub

Drives each WebSocket connection from accept to cleanup:
- Registers the client and sends its assign-id
- Feeds every received frame to the MessageRouter
- On close or transport error, evicts the client and tells the others once
"""
import logging
from typing import Optional

from fastapi import WebSocket, WebSocketDisconnect

from call_hub.schemas.websocket_events import AssignIdEvent
from call_hub.services import metrics
from call_hub.services.connection import ClientRegistry, ClientSession, SignalingRelay
from call_hub.services.protocols import AudioTranslatorProtocol
from call_hub.services.translation import TranslationPipelineAdapter
from .router import MessageRouter

logger = logging.getLogger(__name__)


class CallHub:
    """
    Owns the hub components and drives the lifecycle of each WebSocket.
    Handles:
    - Connection registration and id assignment
    - Message loop processing (Text/Audio)
    - Cleanup and disconnect notification
    """

    def __init__(
        self,
        translator: AudioTranslatorProtocol,
        translation_timeout_sec: Optional[float] = None,
    ):
        self.translator = translator
        self.registry = ClientRegistry()
        self.relay = SignalingRelay(self.registry)
        self.translation = TranslationPipelineAdapter(
            self.registry, translator, timeout_sec=translation_timeout_sec
        )
        self.router = MessageRouter(self.registry, self.relay, self.translation)

    async def handle_connection(self, websocket: WebSocket) -> None:
        """
        Main entry point for handling a WebSocket connection.
        """
        await websocket.accept()
        session = await self._register_connection(websocket)

        try:
            await self._message_loop(session)
        finally:
            await self._cleanup(session)

    async def _register_connection(self, websocket: WebSocket) -> ClientSession:
        session = self.registry.register(websocket)
        metrics.connected_clients.set(len(self.registry))
        await session.send_text(AssignIdEvent(clientId=session.id).model_dump_json())
        return session

    async def _message_loop(self, session: ClientSession) -> None:
        """
        Main message processing loop.
        """
        try:
            while True:
                message = await session.websocket.receive()

                if message["type"] == "websocket.disconnect":
                    logger.info(f"[Hub] Client {session.id} closed the connection")
                    break

                payload = message.get("text")
                if payload is None:
                    payload = message.get("bytes")
                await self.router.dispatch(session, payload)

        except WebSocketDisconnect:
            logger.info(f"[Hub] Client {session.id} disconnected")

        except Exception as e:
            logger.error(f"[Hub] WebSocket error for client {session.id}: {e}")

    async def _cleanup(self, session: ClientSession) -> None:
        if self.registry.remove(session.id) is None:
            return

        metrics.connected_clients.set(len(self.registry))
        await self.relay.notify_disconnected(session.id)

    async def shutdown(self) -> None:
        await self.translation.shutdown()
        self.translator.close()
