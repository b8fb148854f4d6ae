from functools import lru_cache
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings
from app.infrastructure.llm.mock_llm import MockLLM
from app.infrastructure.llm.openai_llm import OpenAILLM
from app.infrastructure.store.appointment_store import CsvAppointmentStore, MemoryAppointmentStore
from app.infrastructure.store.memory_store import MemoryBookingSessionStore, MemoryConversationStore
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.llm import LLMPort
from app.application.ports.session_store import BookingSessionStorePort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.generate_reply import GenerateReplyUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase


logger = logging.getLogger(__name__)


def get_timezone() -> ZoneInfo:
    try:
        return ZoneInfo(settings.BUSINESS_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown BUSINESS_TIMEZONE, using UTC", extra={"reason": settings.BUSINESS_TIMEZONE})
        return ZoneInfo("UTC")


@lru_cache
def get_llm() -> LLMPort:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAILLM()
    logger.info("OPENAI_API_KEY missing, using MockLLM")
    return MockLLM()


@lru_cache
def get_conversation_store() -> ConversationStorePort:
    return MemoryConversationStore(history_limit=settings.CHAT_HISTORY_LIMIT)


@lru_cache
def get_session_store() -> BookingSessionStorePort:
    return MemoryBookingSessionStore()


@lru_cache
def get_appointment_store() -> AppointmentStorePort:
    kind = settings.APPOINTMENT_STORE.strip().lower()
    if kind == "csv":
        logger.info("Using CsvAppointmentStore", extra={"reason": settings.APPOINTMENTS_CSV_PATH})
        return CsvAppointmentStore(path=settings.APPOINTMENTS_CSV_PATH, timezone=get_timezone())
    if kind != "memory":
        raise ValueError(f"APPOINTMENT_STORE must be 'memory' or 'csv', got {settings.APPOINTMENT_STORE!r}")
    return MemoryAppointmentStore(timezone=get_timezone())


def get_generate_reply_use_case() -> GenerateReplyUseCase:
    return GenerateReplyUseCase(llm=get_llm(), store=get_conversation_store())


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        sessions=get_session_store(),
        appointments=get_appointment_store(),
        timezone=get_timezone(),
    )


def get_handle_chat_message_use_case() -> HandleChatMessageUseCase:
    return HandleChatMessageUseCase(
        sessions=get_session_store(),
        booking=get_booking_use_case(),
        generate_reply=get_generate_reply_use_case(),
    )
