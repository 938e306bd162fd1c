"""Business Logic Services.

This package contains the service modules that implement the call hub.

Service Categories:
- Connection: Client registry, broadcast, signaling relay
- Session: Frame classification, routing, WebSocket lifecycle
- Translation: Audio translation adapter and providers

External integrations:
- gcp: Google Cloud Speech and Translation
- translation.gemini: Gemini via Vertex AI
"""
