"""
Tests for the message router.
"""
import json
from unittest.mock import Mock

import pytest

from call_hub.config.constants import Language
from call_hub.services.connection import SignalingRelay
from call_hub.services.session import MessageRouter
from tests.helpers import FakeWebSocket


@pytest.fixture
def hub_parts(registry):
    translation = Mock()
    router = MessageRouter(registry, SignalingRelay(registry), translation)
    sender_ws, peer_ws = FakeWebSocket(), FakeWebSocket()
    sender = registry.register(sender_ws)
    peer = registry.register(peer_ws)
    return {
        "router": router,
        "translation": translation,
        "sender": sender,
        "sender_ws": sender_ws,
        "peer": peer,
        "peer_ws": peer_ws,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("message", [
    {"type": "webrtc-offer", "signalData": {"type": "offer", "sdp": "v=0"}},
    {"type": "webrtc-answer", "signalData": {"type": "answer", "sdp": "v=0"}},
    {"type": "webrtc-ice-candidate", "candidate": {"candidate": "candidate:1", "sdpMLineIndex": 0}},
])
async def test_signaling_is_relayed_to_peer_only(hub_parts, message):
    await hub_parts["router"].dispatch(hub_parts["sender"], json.dumps(message))

    assert hub_parts["sender_ws"].sent == []
    assert [json.loads(m) for m in hub_parts["peer_ws"].sent] == [message]


@pytest.mark.asyncio
async def test_language_toggle_updates_registry(hub_parts, registry):
    sender = hub_parts["sender"]
    toggle = {"type": "language-toggle", "payload": {"language": "ur"}}

    await hub_parts["router"].dispatch(sender, json.dumps(toggle))

    assert registry.get(sender.id).language == Language.UR
    assert hub_parts["peer_ws"].sent == []


@pytest.mark.asyncio
@pytest.mark.parametrize("toggle", [
    {"type": "language-toggle", "payload": {"language": "fr"}},
    {"type": "language-toggle", "payload": {}},
    {"type": "language-toggle"},
])
async def test_invalid_language_toggle_is_ignored(hub_parts, registry, toggle):
    sender = hub_parts["sender"]

    await hub_parts["router"].dispatch(sender, json.dumps(toggle))

    assert registry.get(sender.id).language == Language.EN


@pytest.mark.asyncio
@pytest.mark.parametrize("message", [
    {"type": "chat", "text": "hi"},
    {"type": ["webrtc-offer"]},
    {"signalData": "sdp1"},
])
async def test_unknown_control_message_changes_nothing(hub_parts, registry, message):
    before = [(s.id, s.language) for s in registry.all()]

    await hub_parts["router"].dispatch(hub_parts["sender"], json.dumps(message))

    assert [(s.id, s.language) for s in registry.all()] == before
    assert hub_parts["sender_ws"].sent == []
    assert hub_parts["peer_ws"].sent == []
    hub_parts["translation"].submit.assert_not_called()


@pytest.mark.asyncio
async def test_audio_is_handed_to_translation(hub_parts):
    chunk = b"\x00\x01\x02\x03" * 100

    await hub_parts["router"].dispatch(hub_parts["sender"], chunk)

    hub_parts["translation"].submit.assert_called_once_with(hub_parts["sender"].id, chunk)
    assert hub_parts["peer_ws"].sent == []


@pytest.mark.asyncio
async def test_malformed_text_is_discarded(hub_parts):
    await hub_parts["router"].dispatch(hub_parts["sender"], "definitely not json")

    hub_parts["translation"].submit.assert_not_called()
    assert hub_parts["sender_ws"].sent == []
    assert hub_parts["peer_ws"].sent == []
