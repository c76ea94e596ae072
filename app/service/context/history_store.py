import logging

from pydantic import TypeAdapter, ValidationError

from app.client.db.redis import KeyValueStore
from app.model.chat.chat_message import ChatMessage

logger = logging.getLogger(__name__)

SESSION_KEY = "ChatHistory"

_history_adapter = TypeAdapter(list[ChatMessage])


class ChatHistoryStore:
    """Keeps one serialized conversation per session under a fixed key."""

    def __init__(self, kv: KeyValueStore, ttl_seconds: int = 1800) -> None:
        self._kv = kv
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"chat:session:{session_id}:{SESSION_KEY}"

    def load(self, session_id: str) -> list[ChatMessage]:
        data = self._kv.get(self._key(session_id))
        if not data:
            return []
        try:
            return _history_adapter.validate_json(data)
        except ValidationError:
            logger.warning("Discarding unreadable chat history for session=%s", session_id)
            return []

    def save(self, session_id: str, history: list[ChatMessage]) -> None:
        payload = _history_adapter.dump_json(history).decode()
        self._kv.set(self._key(session_id), payload, self.ttl_seconds)

    def clear(self, session_id: str) -> None:
        self._kv.delete(self._key(session_id))
