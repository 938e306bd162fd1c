"""
Connection Management Module

Client registry, broadcast primitive and signaling relay.
"""
from .models import ClientSession
from .registry import ClientRegistry
from .broadcast import broadcast
from .signaling import SignalingRelay

__all__ = [
    "ClientSession",
    "ClientRegistry",
    "SignalingRelay",
    "broadcast",
]
