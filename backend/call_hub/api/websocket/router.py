"""
WebSocket Router - Real-time Call Communication Endpoint

This is the thin routing layer that delegates to the application's CallHub
for all WebSocket session management.
"""
from fastapi import APIRouter, WebSocket

from call_hub.services.session import CallHub

router = APIRouter()


@router.websocket("/ws")
async def ws_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for signaling and live translation.

    On connect the server sends {"type": "assign-id", "clientId": ...}.

    Message Types (JSON):
        - webrtc-offer / webrtc-answer / webrtc-ice-candidate:
          relayed verbatim to the other participants
        - language-toggle: {"payload": {"language": "en" | "ur"}}

    Binary Messages:
        - Raw audio chunks to be transcribed and translated
    """
    hub: CallHub = websocket.app.state.hub
    await hub.handle_connection(websocket)
