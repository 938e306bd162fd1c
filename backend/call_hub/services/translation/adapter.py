"""
Translation Pipeline Adapter

Sends a client's audio chunk to the external speech translation service
and fans the result out to the call:
- Success: translation-result to every client, the speaker included
- Failure: error event to the speaker only

One task is spawned per chunk. Chunks from the same speaker are processed
in arrival order; different speakers are processed concurrently.
"""
import asyncio
import logging
import time
from typing import Optional, Set, Tuple

from call_hub.config.constants import (
    DEFAULT_LANGUAGE,
    LANGUAGE_NAMES,
    LANGUAGE_PAIRS,
    TRANSLATION_FAILED_MESSAGE,
    Language,
)
from call_hub.schemas.websocket_events import (
    ErrorEvent,
    TranslationResultEvent,
    TranslationResultPayload,
)
from call_hub.services import metrics
from call_hub.services.connection import ClientRegistry, broadcast
from call_hub.services.protocols import AudioTranslatorProtocol

logger = logging.getLogger(__name__)


def language_direction(language: Language) -> Tuple[str, str]:
    """Return (source, target) language names for a speaker's language."""
    return LANGUAGE_NAMES[language], LANGUAGE_NAMES[LANGUAGE_PAIRS[language]]


class TranslationPipelineAdapter:
    """Bridges audio frames from the hub to an AudioTranslatorProtocol."""

    def __init__(
        self,
        registry: ClientRegistry,
        translator: AudioTranslatorProtocol,
        timeout_sec: Optional[float] = None,
    ):
        self.registry = registry
        self.translator = translator
        self.timeout_sec = timeout_sec
        self._tasks: Set[asyncio.Task] = set()

    def submit(self, sender_id: str, chunk: bytes) -> asyncio.Task:
        """Schedule translation of a chunk without waiting for it."""
        task = asyncio.create_task(
            self.handle_audio(sender_id, chunk),
            name=f"translate:{sender_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def handle_audio(self, sender_id: str, chunk: bytes) -> None:
        logger.info(f"[Translation] Received audio chunk from {sender_id} ({len(chunk)} bytes)")

        session = self.registry.get(sender_id)
        language = session.language if session else DEFAULT_LANGUAGE
        source_lang, target_lang = language_direction(language)

        if session is None:
            await self._translate_and_publish(sender_id, chunk, source_lang, target_lang)
            return

        async with session.translation_lock:
            await self._translate_and_publish(sender_id, chunk, source_lang, target_lang)

    async def _translate_and_publish(
        self,
        sender_id: str,
        chunk: bytes,
        source_lang: str,
        target_lang: str,
    ) -> None:
        started = time.perf_counter()
        try:
            outcome = await asyncio.wait_for(
                self.translator.process_audio(chunk, source_lang, target_lang),
                timeout=self.timeout_sec,
            )
        except asyncio.CancelledError:
            raise
        except asyncio.TimeoutError:
            logger.error(f"[Translation] Timeout after {self.timeout_sec}s for client {sender_id}")
            await self._report_failure(sender_id)
            return
        except Exception as e:
            logger.error(f"[Translation] Error processing audio for client {sender_id}: {e}")
            await self._report_failure(sender_id)
            return
        finally:
            metrics.translation_latency.observe(time.perf_counter() - started)

        metrics.translations_processed.labels(status="success").inc()

        if sender_id not in self.registry:
            logger.info(f"[Translation] Client {sender_id} left before its result was ready, broadcasting anyway")

        event = TranslationResultEvent(
            payload=TranslationResultPayload(
                senderId=sender_id,
                originalText=outcome.original_text,
                translatedText=outcome.translated_text,
                sourceLang=source_lang,
                targetLang=target_lang,
            )
        )
        await broadcast(self.registry, event.model_dump())

    async def _report_failure(self, sender_id: str) -> None:
        metrics.translations_processed.labels(status="error").inc()

        session = self.registry.get(sender_id)
        if session is None or not session.is_open:
            return

        await session.send_text(ErrorEvent(message=TRANSLATION_FAILED_MESSAGE).model_dump_json())

    async def shutdown(self) -> None:
        """Cancel translations still in flight."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info(f"[Translation] Cancelled {len(tasks)} in-flight translation(s)")

    @property
    def pending(self) -> int:
        return len(self._tasks)
