from __future__ import annotations

from app.application.ports.llm import LLMPort
from app.application.utils.documents import document_request
from app.domain.entities.message import ChatMessage


class MockLLM(LLMPort):
    """Offline stand-in used when no OpenAI key is configured."""

    def reply_to_message(self, history: list[ChatMessage], message: str) -> str:
        return f"You said: {message.strip()}. (Mock reply: set OPENAI_API_KEY for real answers.)"

    def analyze_document(
        self,
        history: list[ChatMessage],
        filename: str,
        content: str,
        message: str | None,
    ) -> str:
        words = len(content.split())
        return (
            f"Received {filename} ({words} words). Request: {document_request(message)} "
            "(Mock reply: set OPENAI_API_KEY for a real analysis.)"
        )
