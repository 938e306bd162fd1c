"""
Tests for the translation pipeline adapter.
"""
import asyncio
import json

import pytest

from call_hub.config.constants import Language
from call_hub.services.protocols import TranslationOutcome
from call_hub.services.translation import (
    TranscriptionError,
    TranslationPipelineAdapter,
    language_direction,
)
from tests.helpers import FakeTranslator, FakeWebSocket


def _messages(ws):
    return [json.loads(m) for m in ws.sent]


def test_language_direction():
    assert language_direction(Language.EN) == ("English", "Urdu")
    assert language_direction(Language.UR) == ("Urdu", "English")


@pytest.mark.asyncio
async def test_result_is_broadcast_to_everyone_including_sender(registry, translator):
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    registry.register(peer_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    await adapter.handle_audio(sender.id, b"audio")

    expected = {
        "type": "translation-result",
        "payload": {
            "senderId": sender.id,
            "originalText": "hello",
            "translatedText": "salam",
            "sourceLang": "English",
            "targetLang": "Urdu",
        },
    }
    assert _messages(sender_ws) == [expected]
    assert _messages(peer_ws) == [expected]
    assert translator.calls == [(b"audio", "English", "Urdu")]


@pytest.mark.asyncio
async def test_language_toggle_swaps_direction(registry, translator):
    sender = registry.register(FakeWebSocket())
    adapter = TranslationPipelineAdapter(registry, translator)

    await adapter.handle_audio(sender.id, b"first")
    registry.set_language(sender.id, Language.UR)
    await adapter.handle_audio(sender.id, b"second")

    assert translator.calls[0][1:] == ("English", "Urdu")
    assert translator.calls[1][1:] == ("Urdu", "English")


@pytest.mark.asyncio
async def test_failure_reports_error_to_sender_only(registry):
    translator = FakeTranslator(error=TranscriptionError("STT returned no text."))
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    registry.register(peer_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    await adapter.handle_audio(sender.id, b"audio")

    assert _messages(sender_ws) == [{"type": "error", "message": "Translation failed."}]
    assert peer_ws.sent == []


@pytest.mark.asyncio
async def test_unexpected_exception_is_contained(registry):
    translator = FakeTranslator(error=KeyError("boom"))
    sender_ws = FakeWebSocket()
    sender = registry.register(sender_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    await adapter.handle_audio(sender.id, b"audio")

    assert _messages(sender_ws) == [{"type": "error", "message": "Translation failed."}]


@pytest.mark.asyncio
async def test_timeout_is_treated_as_failure(registry, translator):
    translator.gate = asyncio.Event()
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    registry.register(peer_ws)
    adapter = TranslationPipelineAdapter(registry, translator, timeout_sec=0.01)

    await adapter.handle_audio(sender.id, b"audio")

    assert _messages(sender_ws) == [{"type": "error", "message": "Translation failed."}]
    assert peer_ws.sent == []


@pytest.mark.asyncio
async def test_sender_leaving_mid_flight_still_broadcasts(registry, translator):
    translator.gate = asyncio.Event()
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    registry.register(peer_ws)
    registry.set_language(sender.id, Language.UR)
    adapter = TranslationPipelineAdapter(registry, translator)

    task = adapter.submit(sender.id, b"audio")
    await asyncio.sleep(0)
    registry.remove(sender.id)
    sender_ws.close()
    translator.gate.set()
    await task

    assert sender_ws.sent == []
    [event] = _messages(peer_ws)
    assert event["payload"]["senderId"] == sender.id
    assert event["payload"]["sourceLang"] == "Urdu"


@pytest.mark.asyncio
async def test_failure_after_sender_left_is_silent(registry):
    translator = FakeTranslator(error=RuntimeError("service down"))
    translator.gate = asyncio.Event()
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    registry.register(peer_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    task = adapter.submit(sender.id, b"audio")
    await asyncio.sleep(0)
    registry.remove(sender.id)
    translator.gate.set()
    await task

    assert sender_ws.sent == []
    assert peer_ws.sent == []


@pytest.mark.asyncio
async def test_unknown_sender_uses_default_language(registry, translator):
    peer_ws = FakeWebSocket()
    registry.register(peer_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    await adapter.handle_audio("vanished", b"audio")

    assert translator.calls == [(b"audio", "English", "Urdu")]
    assert _messages(peer_ws)[0]["payload"]["senderId"] == "vanished"


class EchoTranslator(FakeTranslator):
    """Echoes the audio bytes back as text; chunks listed in `delays` are slow."""

    def __init__(self, delays=None):
        super().__init__()
        self.delays = delays or {}

    async def process_audio(self, audio, source_lang, target_lang):
        self.calls.append((audio, source_lang, target_lang))
        await asyncio.sleep(self.delays.get(audio, 0))
        text = audio.decode()
        return TranslationOutcome(text, text)


@pytest.mark.asyncio
async def test_results_from_one_sender_keep_arrival_order(registry):
    translator = EchoTranslator(delays={b"1": 0.05})
    sender_ws = FakeWebSocket()
    sender = registry.register(sender_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    tasks = [adapter.submit(sender.id, chunk) for chunk in (b"1", b"2", b"3")]
    await asyncio.gather(*tasks)

    assert [m["payload"]["originalText"] for m in _messages(sender_ws)] == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_senders_do_not_block_each_other(registry):
    translator = EchoTranslator(delays={b"slow": 0.5})
    slow = registry.register(FakeWebSocket())
    fast_ws = FakeWebSocket()
    fast = registry.register(fast_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    slow_task = adapter.submit(slow.id, b"slow")
    fast_task = adapter.submit(fast.id, b"fast")
    await fast_task

    assert not slow_task.done()
    assert [m["payload"]["originalText"] for m in _messages(fast_ws)] == ["fast"]

    await adapter.shutdown()


@pytest.mark.asyncio
async def test_shutdown_cancels_pending_translations(registry, translator):
    translator.gate = asyncio.Event()
    sender_ws = FakeWebSocket()
    sender = registry.register(sender_ws)
    adapter = TranslationPipelineAdapter(registry, translator)

    task = adapter.submit(sender.id, b"audio")
    await asyncio.sleep(0)
    assert adapter.pending == 1

    await adapter.shutdown()

    assert task.cancelled()
    assert adapter.pending == 0
    assert sender_ws.sent == []
