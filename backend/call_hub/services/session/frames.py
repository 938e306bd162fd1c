"""
Inbound frame classification.

A client sends either JSON control messages or raw audio with no envelope.
classify_frame() turns a received payload into exactly one of:
- ControlFrame: the payload is a JSON object (text, or UTF-8 bytes)
- AudioFrame: the payload is bytes that are not a JSON object
- MalformedFrame: anything else
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class ControlFrame:
    message: Dict[str, Any]

    @property
    def type(self) -> Optional[Any]:
        return self.message.get("type")


@dataclass(frozen=True)
class AudioFrame:
    chunk: bytes


@dataclass(frozen=True)
class MalformedFrame:
    reason: str


InboundFrame = Union[ControlFrame, AudioFrame, MalformedFrame]


def _parse_object(text: str) -> Optional[Dict[str, Any]]:
    # Deeply nested input exhausts the decoder stack: RecursionError
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def classify_frame(payload: Union[str, bytes, None]) -> InboundFrame:
    if isinstance(payload, str):
        message = _parse_object(payload)
        if message is None:
            return MalformedFrame("text frame is not a JSON object")
        return ControlFrame(message)

    if isinstance(payload, (bytes, bytearray)):
        # Audio almost never starts with "{", so skip the JSON attempt otherwise
        if payload.lstrip()[:1] == b"{":
            try:
                message = _parse_object(payload.decode("utf-8"))
            except UnicodeDecodeError:
                message = None
            if message is not None:
                return ControlFrame(message)
        return AudioFrame(bytes(payload))

    return MalformedFrame("frame carries neither text nor bytes")
