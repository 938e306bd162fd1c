"""
WebSocket Event Schemas

Pydantic models for type-safe WebSocket event handling.

Signaling messages (webrtc-offer, webrtc-answer, webrtc-ice-candidate) are
relayed verbatim and intentionally have no model here.
"""

from typing import Literal
from pydantic import BaseModel

from call_hub.config.constants import Language


# =============================================================================
# Client -> Server
# =============================================================================

class WebSocketEventBase(BaseModel):
    """Base model for all WebSocket events."""
    type: str


class LanguagePayload(BaseModel):
    language: Language


class LanguageToggleEvent(WebSocketEventBase):
    """Client declares the language it now speaks."""
    type: Literal["language-toggle"] = "language-toggle"
    payload: LanguagePayload


# =============================================================================
# Server -> Client
# =============================================================================

class AssignIdEvent(WebSocketEventBase):
    """Sent once, right after the connection is accepted."""
    type: Literal["assign-id"] = "assign-id"
    clientId: str


class ClientDisconnectedEvent(WebSocketEventBase):
    type: Literal["client-disconnected"] = "client-disconnected"
    clientId: str


class TranslationResultPayload(BaseModel):
    senderId: str
    originalText: str
    translatedText: str
    sourceLang: str
    targetLang: str


class TranslationResultEvent(WebSocketEventBase):
    """Caption for one audio chunk, delivered to every participant."""
    type: Literal["translation-result"] = "translation-result"
    payload: TranslationResultPayload


class ErrorEvent(WebSocketEventBase):
    type: Literal["error"] = "error"
    message: str
