"""
GCP Services Package

Exports the Speech-to-Text + Translation pipeline and its services.
"""

from call_hub.services.gcp.speech import GCPSpeechService
from call_hub.services.gcp.translate import GCPTranslationService
from call_hub.services.gcp.pipeline import GCPAudioTranslator

__all__ = [
    "GCPSpeechService",
    "GCPTranslationService",
    "GCPAudioTranslator",
]
