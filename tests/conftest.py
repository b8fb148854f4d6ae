"""
Shared fixtures: frozen clock, in-memory stores, fake LLM and an API client
wired against them.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from app.application.exceptions import AppointmentStorageError, LLMUpstreamError
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.llm import LLMPort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.generate_reply import GenerateReplyUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.domain.entities.message import ChatMessage
from app.infrastructure.store.appointment_store import MemoryAppointmentStore
from app.infrastructure.store.memory_store import MemoryBookingSessionStore, MemoryConversationStore

UTC = ZoneInfo("UTC")

# Friday; the next business day is Monday, January 5, 2026.
FROZEN_NOW = datetime(2026, 1, 2, 10, 0, tzinfo=UTC)


def frozen_clock() -> datetime:
    return FROZEN_NOW


class FakeLLM(LLMPort):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[str, list[ChatMessage], str]] = []

    def reply_to_message(self, history: list[ChatMessage], message: str) -> str:
        self.calls.append(("chat", list(history), message))
        if self.fail:
            raise LLMUpstreamError("upstream down")
        return f"LLM: {message}"

    def analyze_document(
        self,
        history: list[ChatMessage],
        filename: str,
        content: str,
        message: str | None,
    ) -> str:
        self.calls.append(("document", list(history), content))
        if self.fail:
            raise LLMUpstreamError("upstream down")
        return f"Summary of {filename}: {content}"


class FailingAppointmentStore(AppointmentStorePort):
    def record(self, request):
        raise AppointmentStorageError("disk full")

    def list_appointments(self):
        raise AppointmentStorageError("disk unreadable")


@pytest.fixture
def session_store() -> MemoryBookingSessionStore:
    return MemoryBookingSessionStore()


@pytest.fixture
def conversation_store() -> MemoryConversationStore:
    return MemoryConversationStore(history_limit=20)


@pytest.fixture
def appointment_store() -> MemoryAppointmentStore:
    return MemoryAppointmentStore(timezone=UTC, clock=frozen_clock)


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def booking(session_store, appointment_store) -> BookingUseCase:
    return BookingUseCase(
        sessions=session_store,
        appointments=appointment_store,
        timezone=UTC,
        clock=frozen_clock,
    )


@pytest.fixture
def generate_reply(fake_llm, conversation_store) -> GenerateReplyUseCase:
    return GenerateReplyUseCase(llm=fake_llm, store=conversation_store)


@pytest.fixture
def gateway(session_store, booking, generate_reply) -> HandleChatMessageUseCase:
    return HandleChatMessageUseCase(sessions=session_store, booking=booking, generate_reply=generate_reply)


@pytest.fixture
def client(gateway, generate_reply, appointment_store):
    from app.api.chat import get_max_upload_bytes
    from app.main import app
    from app.wiring.dependencies import (
        get_appointment_store,
        get_generate_reply_use_case,
        get_handle_chat_message_use_case,
    )

    app.dependency_overrides[get_handle_chat_message_use_case] = lambda: gateway
    app.dependency_overrides[get_generate_reply_use_case] = lambda: generate_reply
    app.dependency_overrides[get_appointment_store] = lambda: appointment_store
    app.dependency_overrides[get_max_upload_bytes] = lambda: 64
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
