"""
Session management module.

Provides the CallHub that drives WebSocket sessions, and the frame router.
"""
from .frames import AudioFrame, ControlFrame, MalformedFrame, classify_frame
from .router import MessageRouter
from .hub import CallHub

__all__ = [
    "CallHub",
    "MessageRouter",
    "AudioFrame",
    "ControlFrame",
    "MalformedFrame",
    "classify_frame",
]
