"""
Protocol definitions for the speech translation collaborator.

This module defines interfaces (Python Protocols) that allow:
- Swapping implementations (e.g., Gemini -> GCP Speech/Translate)
- Testing without real API credentials
- Clear contracts between the hub and the external service

Usage:
    from call_hub.services.protocols import AudioTranslatorProtocol

    async def caption(translator: AudioTranslatorProtocol, audio: bytes):
        outcome = await translator.process_audio(audio, "English", "Urdu")
        print(outcome.original_text, outcome.translated_text)
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TranslationOutcome:
    """Text produced for one audio chunk."""
    original_text: str
    translated_text: str


class AudioTranslatorProtocol(Protocol):
    """
    Interface for a speech-to-text + translation service.

    Implementations run transcription first, then translation of the
    transcript. A failure in either step must surface as a
    TranslationServiceError.
    """

    async def process_audio(
        self,
        audio: bytes,
        source_lang: str,
        target_lang: str,
    ) -> TranslationOutcome:
        """
        Transcribe and translate an audio chunk.

        Args:
            audio: Raw audio bytes as captured by the client
            source_lang: Spoken language name (e.g., "English", "Urdu")
            target_lang: Language name to translate into

        Returns:
            TranslationOutcome with the transcript and its translation
        """
        ...

    def close(self) -> None:
        """Release SDK clients and worker threads."""
        ...
