from __future__ import annotations

import logging

from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.llm import LLMPort
from app.application.utils.documents import document_request


class GenerateReplyUseCase:
    def __init__(self, llm: LLMPort, store: ConversationStorePort) -> None:
        self._llm = llm
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, session_id: str, message: str) -> str:
        history = self._store.get_history(session_id)
        reply = self._llm.reply_to_message(history=history, message=message)
        self._logger.info("LLM reply generated", extra={"session_id": session_id})
        self.remember_exchange(session_id, message, reply)
        return reply

    def execute_with_document(self, session_id: str, filename: str, content: str, message: str | None) -> str:
        history = self._store.get_history(session_id)
        reply = self._llm.analyze_document(history=history, filename=filename, content=content, message=message)
        self._logger.info("Document analysis generated", extra={"session_id": session_id})
        self.remember_exchange(session_id, f"[Uploaded file: {filename}] {document_request(message)}", reply)
        return reply

    def remember_exchange(self, session_id: str, message: str, reply: str) -> None:
        self._store.append_message(session_id, role="user", text=message)
        self._store.append_message(session_id, role="model", text=reply)
