"""
GCP Translation Service

Handles Google Cloud Translation operations.
"""

from typing import Optional

from google.cloud import translate

from call_hub.services.gcp.speech import ensure_credentials


class GCPTranslationService:
    """Handles translation operations."""

    def __init__(
        self,
        project_id: str,
        location: str = "global",
        credentials_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.project_id = project_id
        self.location = location
        self.timeout = timeout
        ensure_credentials(credentials_path)
        self._client = translate.TranslationServiceClient()

    def translate_text(
        self,
        text: str,
        *,
        source_language_code: str,
        target_language_code: str,
    ) -> str:
        """Translate text from source to target language."""
        parent = f"projects/{self.project_id}/locations/{self.location}"

        response = self._client.translate_text(
            request={
                "parent": parent,
                "contents": [text],
                "mime_type": "text/plain",
                "source_language_code": source_language_code,
                "target_language_code": target_language_code,
            },
            timeout=self.timeout,
        )

        if not response.translations:
            return ""

        return response.translations[0].translated_text
