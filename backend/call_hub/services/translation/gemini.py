"""
Gemini Audio Translator - speech-to-text and translation using Vertex AI.

Runs two sequential Gemini calls per audio chunk:
1. Transcribe the inline audio in the speaker's language
2. Translate the transcript into the listener's language

Text-to-speech is left to the receiving client.

Usage:
    from call_hub.services.translation.gemini import GeminiAudioTranslator

    translator = GeminiAudioTranslator(project_id="my-project")
    outcome = await translator.process_audio(audio, "Urdu", "English")
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import vertexai
from vertexai.generative_models import GenerationConfig, GenerativeModel, Part

from call_hub.config.constants import (
    GEMINI_AUDIO_MIME_TYPE,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_TEMPERATURE,
    LANGUAGE_LOCALES,
    TRANSLATION_EXECUTOR_WORKERS,
)
from call_hub.services.protocols import TranslationOutcome
from call_hub.services.translation.exceptions import (
    TextTranslationError,
    TranscriptionError,
)

logger = logging.getLogger(__name__)

TRANSCRIPTION_PROMPT = (
    "Transcribe the following audio spoken in {language_code}. "
    "Provide only the text of the transcription."
)

TRANSLATION_PROMPT = 'Translate the following text from {source_lang} to {target_lang}: "{text}"'


class GeminiAudioTranslator:
    """
    Transcribes and translates audio chunks with Gemini via Vertex AI.

    The Vertex AI SDK is blocking, so each call runs in a dedicated thread
    pool and the coroutine only awaits the future.
    """

    def __init__(
        self,
        project_id: str,
        location: str = "us-central1",
        model_name: str = "gemini-1.5-flash",
        request_timeout: Optional[float] = None,
    ):
        # Deadline for every Vertex AI request
        vertexai.init(project=project_id, location=location, request_timeout=request_timeout)
        self._model = GenerativeModel(model_name)
        self._generation_config = GenerationConfig(
            temperature=GEMINI_TEMPERATURE,
            max_output_tokens=GEMINI_MAX_OUTPUT_TOKENS,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=TRANSLATION_EXECUTOR_WORKERS,
            thread_name_prefix="vertex_ai",
        )
        logger.info(
            f"[GeminiTranslator] Initialized Vertex AI Gemini "
            f"(project={project_id}, location={location}, model={model_name})"
        )

    def _generate_text(self, contents) -> str:
        """Synchronous call to Gemini (runs in thread pool)."""
        response = self._model.generate_content(
            contents,
            generation_config=self._generation_config,
        )
        # response.text raises ValueError when the candidate was blocked or empty
        try:
            text = response.text
        except ValueError:
            return ""
        return (text or "").strip()

    def speech_to_text(self, audio: bytes, language_code: str) -> str:
        prompt = TRANSCRIPTION_PROMPT.format(language_code=language_code)
        audio_part = Part.from_data(data=audio, mime_type=GEMINI_AUDIO_MIME_TYPE)
        try:
            text = self._generate_text([prompt, audio_part])
        except Exception as e:
            raise TranscriptionError(f"Failed to transcribe audio: {e}") from e
        if not text:
            raise TranscriptionError("STT returned no text.")
        logger.info(f"[GeminiTranslator] STT result ({language_code}): {text}")
        return text

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        prompt = TRANSLATION_PROMPT.format(
            source_lang=source_lang,
            target_lang=target_lang,
            text=text,
        )
        try:
            translated = self._generate_text(prompt)
        except Exception as e:
            raise TextTranslationError(f"Failed to translate text: {e}") from e
        if not translated:
            raise TextTranslationError("Translation returned no text.")
        logger.info(f"[GeminiTranslator] Translation result ({target_lang}): {translated}")
        return translated

    def _process_sync(self, audio: bytes, source_lang: str, target_lang: str) -> TranslationOutcome:
        language_code = LANGUAGE_LOCALES.get(source_lang, "en-US")
        original_text = self.speech_to_text(audio, language_code)
        translated_text = self.translate_text(original_text, source_lang, target_lang)
        return TranslationOutcome(original_text, translated_text)

    async def process_audio(
        self,
        audio: bytes,
        source_lang: str,
        target_lang: str,
    ) -> TranslationOutcome:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor,
            self._process_sync,
            audio,
            source_lang,
            target_lang,
        )

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
