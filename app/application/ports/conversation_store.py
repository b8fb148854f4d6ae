from abc import ABC, abstractmethod

from app.domain.entities.message import ChatMessage


class ConversationStorePort(ABC):
    @abstractmethod
    def get_history(self, session_id: str) -> list[ChatMessage]:
        raise NotImplementedError

    @abstractmethod
    def append_message(self, session_id: str, role: str, text: str) -> None:
        """
        Append one message to the session history.
        Implementations keep only the most recent entries up to their history limit.
        """
        raise NotImplementedError
