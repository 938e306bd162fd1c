"""
Broadcast

Fan-out of one message to every open client, optionally skipping the sender.
"""
import json
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from call_hub.services import metrics

if TYPE_CHECKING:
    from .registry import ClientRegistry

logger = logging.getLogger(__name__)


async def broadcast(
    registry: "ClientRegistry",
    message: Dict[str, Any],
    exclude_id: Optional[str] = None
) -> int:
    """
    Send a JSON message to all open connections.

    The message is serialized once and the same frame is sent to every
    recipient. Connections that are closed, or close while the broadcast
    is in progress, are skipped.

    Args:
        registry: Connected clients
        message: JSON-serializable message
        exclude_id: Client ID that must not receive the message

    Returns:
        Number of clients the message was delivered to
    """
    data = json.dumps(message)
    sent_count = 0

    for session in registry.all():
        if session.id == exclude_id or not session.is_open:
            continue

        if await session.send_text(data):
            sent_count += 1

    metrics.messages_broadcast.labels(type=str(message.get("type"))).inc(sent_count)
    return sent_count
