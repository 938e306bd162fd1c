"""
GCP Speech Service

Handles Google Cloud Speech-to-Text operations.
"""

import os
from typing import Optional

from google.cloud import speech

from call_hub.config.constants import GCP_STT_SAMPLE_RATE_HZ


def ensure_credentials(credentials_path: Optional[str]) -> None:
    """Export the configured credentials file for the Google SDK clients."""
    if credentials_path and "GOOGLE_APPLICATION_CREDENTIALS" not in os.environ:
        os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = credentials_path


class GCPSpeechService:
    """Handles Speech-to-Text operations."""

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        ensure_credentials(credentials_path)
        self.timeout = timeout
        self._client = speech.SpeechClient()

    def transcribe(self, chunk: bytes, language_code: str) -> str:
        """Transcribe a single audio chunk."""
        config = speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding.LINEAR16,
            sample_rate_hertz=GCP_STT_SAMPLE_RATE_HZ,
            language_code=language_code,
            enable_automatic_punctuation=True,
        )
        audio = speech.RecognitionAudio(content=chunk)

        response = self._client.recognize(
            config=config, audio=audio, timeout=self.timeout
        )
        if not response.results:
            return ""

        return " ".join(
            result.alternatives[0].transcript.strip()
            for result in response.results
            if result.alternatives
        ).strip()
