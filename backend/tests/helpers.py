import asyncio
from typing import List, Optional

from starlette.websockets import WebSocketState

from call_hub.services.protocols import TranslationOutcome


class FakeWebSocket:
    """Stands in for a Starlette WebSocket: records every frame sent to it."""

    def __init__(self, fail_on_send: bool = False):
        self.sent: List[str] = []
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail_on_send = fail_on_send

    async def send_text(self, data: str):
        if self.fail_on_send:
            raise RuntimeError("connection reset")
        self.sent.append(data)

    def close(self):
        self.client_state = WebSocketState.DISCONNECTED
        self.application_state = WebSocketState.DISCONNECTED


class FakeTranslator:
    """
    Predictable AudioTranslatorProtocol implementation.

    Records calls as (audio, source_lang, target_lang). Raises `error` if set.
    When `gate` is set, every call waits for it before returning.
    """

    def __init__(
        self,
        original_text: str = "hello",
        translated_text: str = "salam",
        error: Optional[Exception] = None,
    ):
        self.original_text = original_text
        self.translated_text = translated_text
        self.error = error
        self.calls = []
        self.gate: Optional[asyncio.Event] = None
        self.closed = False

    async def process_audio(self, audio: bytes, source_lang: str, target_lang: str) -> TranslationOutcome:
        self.calls.append((audio, source_lang, target_lang))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return TranslationOutcome(self.original_text, self.translated_text)

    def close(self) -> None:
        self.closed = True

