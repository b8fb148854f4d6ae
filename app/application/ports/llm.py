from abc import ABC, abstractmethod

from app.domain.entities.message import ChatMessage


class LLMPort(ABC):
    @abstractmethod
    def reply_to_message(self, history: list[ChatMessage], message: str) -> str:
        """
        Answer a chat message in the context of prior turns.

        Args:
            history: Prior turns for this session, oldest first (roles "user" / "model")
            message: The user's new message, as typed

        Returns:
            Plain-text reply

        Raises:
            LLMUpstreamError: networking/provider failures
            LLMContractError: provider returned no usable text
        """
        raise NotImplementedError

    @abstractmethod
    def analyze_document(
        self,
        history: list[ChatMessage],
        filename: str,
        content: str,
        message: str | None,
    ) -> str:
        """
        Answer a request about an uploaded text document.

        Args:
            history: Prior turns for this session, oldest first
            filename: Original name of the uploaded file
            content: Decoded document text
            message: User request; a summary is requested when blank

        Returns:
            Plain-text reply

        Raises:
            LLMUpstreamError: networking/provider failures
            LLMContractError: provider returned no usable text
        """
        raise NotImplementedError
