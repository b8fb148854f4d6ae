from __future__ import annotations

import logging

from app.application.ports.session_store import BookingSessionStorePort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.generate_reply import GenerateReplyUseCase
from app.application.utils.message_rules import is_booking_request
from app.domain.entities.booking_session import BookingSession


class HandleChatMessageUseCase:
    """
    Route one chat message to the booking dialogue or to the LLM.

    A message goes to the booking dialogue when its session already has an
    open booking form, or when it contains a booking-intent keyword. In the
    second case a fresh form is opened and the triggering message is not
    used as an answer.
    """

    def __init__(
        self,
        sessions: BookingSessionStorePort,
        booking: BookingUseCase,
        generate_reply: GenerateReplyUseCase,
    ) -> None:
        self._sessions = sessions
        self._booking = booking
        self._generate_reply = generate_reply
        self._logger = logging.getLogger(__name__)

    def handle(self, session_id: str, message: str) -> str:
        has_open_form = self._sessions.has(session_id)
        if not has_open_form and not is_booking_request(message):
            return self._generate_reply.execute(session_id, message)

        session = self._sessions.get(session_id) if has_open_form else None
        if session is None:
            self._logger.info("Booking started", extra={"session_id": session_id})
            session = BookingSession()

        result = self._booking.advance(session_id, message, session)
        if result.is_complete:
            self._generate_reply.remember_exchange(session_id, message, result.reply)
        return result.reply
