"""
Message Router

Dispatches each inbound frame of a client:
- Signaling messages -> SignalingRelay
- language-toggle -> ClientRegistry
- Audio chunks -> TranslationPipelineAdapter
Unknown or malformed frames are logged and dropped; they never close the
connection.
"""
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from call_hub.config.constants import MSG_LANGUAGE_TOGGLE, SIGNALING_MESSAGE_TYPES
from call_hub.schemas.websocket_events import LanguageToggleEvent
from call_hub.services import metrics
from call_hub.services.connection import ClientRegistry, ClientSession, SignalingRelay
from call_hub.services.translation import TranslationPipelineAdapter
from .frames import AudioFrame, ControlFrame, MalformedFrame, classify_frame

logger = logging.getLogger(__name__)


class MessageRouter:
    """Stateless dispatcher between the receive loop and the hub components."""

    def __init__(
        self,
        registry: ClientRegistry,
        relay: SignalingRelay,
        translation: TranslationPipelineAdapter,
    ):
        self.registry = registry
        self.relay = relay
        self.translation = translation

    async def dispatch(self, session: ClientSession, payload: Union[str, bytes, None]) -> None:
        frame = classify_frame(payload)

        if isinstance(frame, ControlFrame):
            metrics.frames_received.labels(kind="control").inc()
            await self._handle_control(session.id, frame.message)
        elif isinstance(frame, AudioFrame):
            metrics.frames_received.labels(kind="audio").inc()
            self.translation.submit(session.id, frame.chunk)
        elif isinstance(frame, MalformedFrame):
            metrics.frames_received.labels(kind="malformed").inc()
            logger.warning(f"[Router] Discarding frame from {session.id}: {frame.reason}")

    async def _handle_control(self, client_id: str, message: Dict[str, Any]) -> None:
        msg_type = message.get("type")
        logger.info(f"[Router] Received message from {client_id}: {msg_type}")

        if not isinstance(msg_type, str):
            logger.info(f"[Router] Control message without a type from {client_id}")

        elif msg_type in SIGNALING_MESSAGE_TYPES:
            await self.relay.relay(message, client_id)

        elif msg_type == MSG_LANGUAGE_TOGGLE:
            try:
                event = LanguageToggleEvent.model_validate(message)
            except ValidationError as e:
                logger.warning(f"[Router] Invalid language-toggle from {client_id}: {e.errors()}")
                return
            self.registry.set_language(client_id, event.payload.language)

        else:
            logger.info(f"[Router] Unknown message type from {client_id}: {msg_type}")
