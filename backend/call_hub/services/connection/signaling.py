"""
Signaling Relay

Forwards WebRTC negotiation messages between peers and announces departures.
SDP and ICE payloads are passed through untouched.
"""
import logging
from typing import Any, Dict, TYPE_CHECKING

from call_hub.schemas.websocket_events import ClientDisconnectedEvent
from .broadcast import broadcast

if TYPE_CHECKING:
    from .registry import ClientRegistry

logger = logging.getLogger(__name__)


class SignalingRelay:
    """Relays signaling messages to every client except the sender."""

    def __init__(self, registry: "ClientRegistry"):
        self.registry = registry

    async def relay(self, message: Dict[str, Any], sender_id: str) -> int:
        sent_count = await broadcast(self.registry, message, exclude_id=sender_id)
        logger.debug(f"[Relay] {message.get('type')} from {sender_id} delivered to {sent_count} peer(s)")
        return sent_count

    async def notify_disconnected(self, client_id: str) -> int:
        """Tell the remaining clients that a peer has left."""
        event = ClientDisconnectedEvent(clientId=client_id)
        return await broadcast(self.registry, event.model_dump())
