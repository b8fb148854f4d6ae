from abc import ABC, abstractmethod

from app.domain.entities.booking_session import BookingSession


class BookingSessionStorePort(ABC):
    @abstractmethod
    def get(self, session_id: str) -> BookingSession | None:
        raise NotImplementedError

    @abstractmethod
    def has(self, session_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def put(self, session_id: str, session: BookingSession) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Remove the session if present. Missing ids are ignored."""
        raise NotImplementedError
