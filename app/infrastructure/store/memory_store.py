from __future__ import annotations

from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.session_store import BookingSessionStorePort
from app.domain.entities.booking_session import BookingSession
from app.domain.entities.message import ChatMessage


class MemoryConversationStore(ConversationStorePort):
    def __init__(self, history_limit: int = 20) -> None:
        self._threads: dict[str, list[ChatMessage]] = {}
        self._history_limit = history_limit

    def get_history(self, session_id: str) -> list[ChatMessage]:
        return list(self._threads.get(session_id, []))

    def append_message(self, session_id: str, role: str, text: str) -> None:
        self._threads.setdefault(session_id, [])
        self._threads[session_id].append(ChatMessage(role=role, text=text))
        if len(self._threads[session_id]) > self._history_limit:
            self._threads[session_id] = self._threads[session_id][-self._history_limit :]


class MemoryBookingSessionStore(BookingSessionStorePort):
    def __init__(self) -> None:
        self._sessions: dict[str, BookingSession] = {}

    def get(self, session_id: str) -> BookingSession | None:
        return self._sessions.get(session_id)

    def has(self, session_id: str) -> bool:
        return session_id in self._sessions

    def put(self, session_id: str, session: BookingSession) -> None:
        self._sessions[session_id] = session

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
