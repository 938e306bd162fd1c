"""
Translator factory.

Picks the configured speech translation provider and refuses to build one
when its required configuration is missing.
"""
import logging

from call_hub.config.settings import Settings
from call_hub.services.protocols import AudioTranslatorProtocol
from call_hub.services.translation.exceptions import TranslationConfigError

logger = logging.getLogger(__name__)


def build_translator(settings: Settings) -> AudioTranslatorProtocol:
    """Create the translator selected by TRANSLATION_PROVIDER."""
    if not settings.GOOGLE_PROJECT_ID:
        raise TranslationConfigError(
            "GOOGLE_PROJECT_ID is not set. Please update backend/.env accordingly."
        )

    if settings.TRANSLATION_PROVIDER == "gemini":
        from call_hub.services.translation.gemini import GeminiAudioTranslator

        if settings.GOOGLE_APPLICATION_CREDENTIALS:
            from call_hub.services.gcp.speech import ensure_credentials
            ensure_credentials(settings.GOOGLE_APPLICATION_CREDENTIALS)

        return GeminiAudioTranslator(
            project_id=settings.GOOGLE_PROJECT_ID,
            location=settings.VERTEX_AI_LOCATION,
            model_name=settings.GEMINI_MODEL_NAME,
            request_timeout=settings.TRANSLATION_TIMEOUT_SEC,
        )

    if settings.TRANSLATION_PROVIDER == "gcp":
        from call_hub.services.gcp.pipeline import GCPAudioTranslator

        return GCPAudioTranslator(
            project_id=settings.GOOGLE_PROJECT_ID,
            credentials_path=settings.GOOGLE_APPLICATION_CREDENTIALS,
            request_timeout=settings.TRANSLATION_TIMEOUT_SEC,
        )

    raise TranslationConfigError(
        f"Unknown TRANSLATION_PROVIDER: {settings.TRANSLATION_PROVIDER}"
    )
