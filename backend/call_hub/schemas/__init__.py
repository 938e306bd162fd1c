"""
Schemas Package

Pydantic models for WebSocket events.
"""

from call_hub.schemas.websocket_events import (
    WebSocketEventBase,
    LanguagePayload,
    LanguageToggleEvent,
    AssignIdEvent,
    ClientDisconnectedEvent,
    TranslationResultPayload,
    TranslationResultEvent,
    ErrorEvent,
)

__all__ = [
    "WebSocketEventBase",
    "LanguagePayload",
    "LanguageToggleEvent",
    "AssignIdEvent",
    "ClientDisconnectedEvent",
    "TranslationResultPayload",
    "TranslationResultEvent",
    "ErrorEvent",
]
