from __future__ import annotations

from typing import Any

from openai import OpenAI

from app.application.exceptions import LLMContractError, LLMUpstreamError
from app.application.ports.llm import LLMPort
from app.core.config import settings
from app.domain.entities.message import ChatMessage
from app.infrastructure.llm.prompts import (
    GREETING_HISTORY,
    SYSTEM_PROMPT,
    build_chat_prompt,
    build_document_prompt,
)

_ROLE_MAP = {"user": "user", "model": "assistant"}


class OpenAILLM(LLMPort):
    """
    OpenAI-backed adapter implementing LLMPort.

    Contract guarantees:
    - reply_to_message / analyze_document return non-empty plain text
    - Raises:
        LLMUpstreamError: networking/provider failures
        LLMContractError: empty completion
    """

    def __init__(self, client: OpenAI | None = None) -> None:
        self.client = client or OpenAI(api_key=settings.OPENAI_API_KEY)

    def reply_to_message(self, history: list[ChatMessage], message: str) -> str:
        return self._call_text(
            model=settings.OPENAI_MODEL_CHAT,
            messages=_build_messages(history, build_chat_prompt(message)),
            temperature=settings.OPENAI_TEMPERATURE_CHAT,
        )

    def analyze_document(
        self,
        history: list[ChatMessage],
        filename: str,
        content: str,
        message: str | None,
    ) -> str:
        return self._call_text(
            model=settings.OPENAI_MODEL_CHAT,
            messages=_build_messages(history, build_document_prompt(filename, content, message)),
            temperature=settings.OPENAI_TEMPERATURE_CHAT,
        )

    def _call_text(self, model: str, messages: list[dict[str, Any]], temperature: float) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=settings.OPENAI_MAX_TOKENS,
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise LLMContractError("LLM returned empty response text.")

        return content


def _build_messages(history: list[ChatMessage], prompt: str) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = [{"role": "system", "content": SYSTEM_PROMPT}]
    for item in (*GREETING_HISTORY, *history):
        messages.append({"role": _ROLE_MAP.get(item.role, "user"), "content": item.text})
    messages.append({"role": "user", "content": prompt})
    return messages
