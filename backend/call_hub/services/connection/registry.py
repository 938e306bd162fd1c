"""
Client Registry

Holds the currently connected clients and their language preference.
All mutations happen on the event loop thread, so a plain dict is enough.
"""
import logging
import uuid
from typing import Dict, List, Optional

from fastapi import WebSocket

from call_hub.config.constants import Language
from .models import ClientSession

logger = logging.getLogger(__name__)


class ClientRegistry:
    """
    Tracks connected clients by id.

    Provides methods for:
    - Registering a connection under a fresh id
    - Looking up and evicting clients
    - Updating a client's language
    """

    def __init__(self):
        # client_id -> ClientSession
        self._clients: Dict[str, ClientSession] = {}

    def register(self, websocket: WebSocket) -> ClientSession:
        """Create a session with a newly generated id and store it."""
        client_id = str(uuid.uuid4())
        while client_id in self._clients:
            client_id = str(uuid.uuid4())

        session = ClientSession(websocket=websocket, client_id=client_id)
        self._clients[client_id] = session
        logger.info(f"Client connected: {client_id}")
        return session

    def get(self, client_id: str) -> Optional[ClientSession]:
        return self._clients.get(client_id)

    def remove(self, client_id: str) -> Optional[ClientSession]:
        """Evict a client. Removing an unknown id is a no-op."""
        session = self._clients.pop(client_id, None)
        if session:
            logger.info(f"Client disconnected: {client_id}")
        return session

    def set_language(self, client_id: str, language: Language) -> bool:
        """Update a client's language. Returns False if the client is gone."""
        session = self._clients.get(client_id)
        if not session:
            return False

        session.language = language
        logger.info(f"Client {client_id} switched language to {language.value}")
        return True

    def all(self) -> List[ClientSession]:
        """Snapshot of the connected clients."""
        return list(self._clients.values())

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._clients
