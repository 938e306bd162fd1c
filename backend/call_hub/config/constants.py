"""
Application-wide constants for the call hub.

Environment-dependent settings (host, port, credentials) belong in settings.py.
This file is for protocol names and operational parameters that rarely change
between environments.
"""
from enum import Enum

# ==============================================================================
# LANGUAGES
# ==============================================================================


class Language(str, Enum):
    """Language a participant speaks, as declared by its client."""
    EN = "en"
    UR = "ur"


# Language used until a client sends a language-toggle
DEFAULT_LANGUAGE: Language = Language.EN

# Human readable names, used in prompts and translation-result events
LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.UR: "Urdu",
}

# Speech recognition locale per language name
LANGUAGE_LOCALES: dict[str, str] = {
    "English": "en-US",
    "Urdu": "ur-PK",
}

# Fixed opposite direction for a two-party call
LANGUAGE_PAIRS: dict[Language, Language] = {
    Language.EN: Language.UR,
    Language.UR: Language.EN,
}

# ==============================================================================
# WEBSOCKET PROTOCOL
# ==============================================================================

# Client -> server control messages
MSG_WEBRTC_OFFER: str = "webrtc-offer"
MSG_WEBRTC_ANSWER: str = "webrtc-answer"
MSG_WEBRTC_ICE_CANDIDATE: str = "webrtc-ice-candidate"
MSG_LANGUAGE_TOGGLE: str = "language-toggle"

# Control messages relayed verbatim to the other peers
SIGNALING_MESSAGE_TYPES: frozenset[str] = frozenset({
    MSG_WEBRTC_OFFER,
    MSG_WEBRTC_ANSWER,
    MSG_WEBRTC_ICE_CANDIDATE,
})

# Text sent to a sender whose audio could not be translated
TRANSLATION_FAILED_MESSAGE: str = "Translation failed."

# ==============================================================================
# AUDIO / SPEECH API
# ==============================================================================

# Sample rate expected by Google Speech-to-Text for raw LINEAR16 chunks
GCP_STT_SAMPLE_RATE_HZ: int = 16000

# MIME type announced to Gemini for inline audio
GEMINI_AUDIO_MIME_TYPE: str = "audio/wav"

# Gemini generation parameters
GEMINI_TEMPERATURE: float = 0.1
GEMINI_MAX_OUTPUT_TOKENS: int = 1024

# Worker threads for blocking SDK calls
TRANSLATION_EXECUTOR_WORKERS: int = 4

# ==============================================================================
# APPLICATION
# ==============================================================================

APP_NAME: str = "AI Voice Translator Hub"
APP_VERSION: str = "1.0.0"
