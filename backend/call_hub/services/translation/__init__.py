"""
Translation Module

This module contains the speech translation services:
- TranslationPipelineAdapter: Routes audio chunks to the translator and fans out results
- GeminiAudioTranslator: Vertex AI Gemini speech-to-text + translation
- build_translator: Provider selection from settings

Usage:
    from call_hub.services.translation import TranslationPipelineAdapter, build_translator
"""

from call_hub.services.translation.adapter import TranslationPipelineAdapter, language_direction
from call_hub.services.translation.exceptions import (
    TranslationServiceError,
    TranscriptionError,
    TextTranslationError,
    TranslationConfigError,
)
from call_hub.services.translation.factory import build_translator

__all__ = [
    "TranslationPipelineAdapter",
    "language_direction",
    "build_translator",
    # Exceptions
    "TranslationServiceError",
    "TranscriptionError",
    "TextTranslationError",
    "TranslationConfigError",
]
