"""
GCP Pipeline Service

Coordinates Speech-to-Text and Translation for a single audio chunk.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from call_hub.config.constants import LANGUAGE_LOCALES, TRANSLATION_EXECUTOR_WORKERS
from call_hub.services.gcp.speech import GCPSpeechService
from call_hub.services.gcp.translate import GCPTranslationService
from call_hub.services.protocols import TranslationOutcome
from call_hub.services.translation.exceptions import (
    TextTranslationError,
    TranscriptionError,
)

logger = logging.getLogger(__name__)


class GCPAudioTranslator:
    """Thin wrapper around Google Cloud Speech/Translate services."""

    def __init__(
        self,
        project_id: str,
        location: str = "global",
        credentials_path: Optional[str] = None,
        request_timeout: Optional[float] = None,
    ):
        # Deadline for each Speech and Translation request
        self.speech_service = GCPSpeechService(credentials_path, timeout=request_timeout)
        self.translation_service = GCPTranslationService(
            project_id, location, credentials_path, timeout=request_timeout
        )
        self._executor = ThreadPoolExecutor(
            max_workers=TRANSLATION_EXECUTOR_WORKERS,
            thread_name_prefix="gcp_pipeline",
        )

    def _transcribe(self, audio: bytes, locale: str) -> str:
        try:
            transcript = self.speech_service.transcribe(audio, locale)
        except Exception as e:
            raise TranscriptionError(f"Failed to transcribe audio: {e}") from e
        if not transcript:
            raise TranscriptionError("STT returned no text.")
        logger.info(f"[GCPPipeline] STT result ({locale}): {transcript}")
        return transcript

    def _translate(self, text: str, source_locale: str, target_locale: str) -> str:
        try:
            translated = self.translation_service.translate_text(
                text,
                source_language_code=source_locale[:2],
                target_language_code=target_locale[:2],
            )
        except Exception as e:
            raise TextTranslationError(f"Failed to translate text: {e}") from e
        if not translated:
            raise TextTranslationError("Translation returned no text.")
        logger.info(f"[GCPPipeline] Translation result ({target_locale}): {translated}")
        return translated

    def process_chunk(self, audio: bytes, source_lang: str, target_lang: str) -> TranslationOutcome:
        """Run transcription -> translation for a chunk."""
        source_locale = LANGUAGE_LOCALES.get(source_lang, "en-US")
        target_locale = LANGUAGE_LOCALES.get(target_lang, "en-US")

        original_text = self._transcribe(audio, source_locale)
        translated_text = self._translate(original_text, source_locale, target_locale)
        return TranslationOutcome(original_text, translated_text)

    async def process_audio(
        self,
        audio: bytes,
        source_lang: str,
        target_lang: str,
    ) -> TranslationOutcome:
        """Execute the pipeline without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor,
            lambda: self.process_chunk(audio, source_lang, target_lang),
        )

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
