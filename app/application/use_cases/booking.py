from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.session_store import BookingSessionStorePort
from app.application.utils.slots import format_long_date, suggest_appointment_times
from app.application.utils.validators import (
    is_valid_appointment_time,
    is_valid_email,
    is_valid_phone,
    normalize_appointment_time,
)
from app.domain.entities.appointment import Appointment, AppointmentRequest
from app.domain.entities.booking_session import BookingSession, BookingStep

MIN_NAME_LENGTH = 2

BOOKING_FAILED_REPLY = (
    "I'm sorry, there was an error saving your appointment. Please try again or contact support."
)


@dataclass(frozen=True)
class BookingTransition:
    reply: str
    session: BookingSession
    completed_request: AppointmentRequest | None = None


@dataclass(frozen=True)
class BookingResult:
    reply: str
    is_complete: bool
    appointment: Appointment | None = None


def advance_session(session: BookingSession, message: str, today: date) -> BookingTransition:
    """
    Compute the next form state for one user message.

    Invalid input returns the session unchanged together with a re-prompt.
    When the time step validates, `completed_request` carries the collected
    form; the caller is responsible for persisting it and closing the session.
    """
    text = message.strip()
    step = session.step

    if step is BookingStep.start:
        return BookingTransition(
            reply="I'd be happy to help you book an appointment! Let's start by getting your name. What should I call you?",
            session=replace(session, step=BookingStep.name),
        )

    if step is BookingStep.name:
        if len(text) < MIN_NAME_LENGTH:
            return BookingTransition(reply="Please provide a valid name with at least 2 characters.", session=session)
        return BookingTransition(
            reply=f"Nice to meet you, {text}! Could you please provide your email address?",
            session=replace(session, step=BookingStep.email, name=text),
        )

    if step is BookingStep.email:
        if not is_valid_email(text):
            return BookingTransition(
                reply="Please provide a valid email address (e.g., john@example.com).",
                session=session,
            )
        return BookingTransition(
            reply="Great! Now I need your phone number for contact purposes.",
            session=replace(session, step=BookingStep.phone, email=text),
        )

    if step is BookingStep.phone:
        if not is_valid_phone(text):
            return BookingTransition(
                reply="Please provide a valid phone number with at least 10 digits (e.g., +1-234-567-8900 or 1234567890).",
                session=session,
            )
        return BookingTransition(
            reply="Perfect! What's the purpose of your appointment? (e.g., consultation, meeting, support, etc.)",
            session=replace(session, step=BookingStep.purpose, phone=text),
        )

    if step is BookingStep.purpose:
        return BookingTransition(
            reply=f"Thank you! Now let's schedule your appointment. {suggest_appointment_times(today)}",
            session=replace(session, step=BookingStep.time, purpose=text),
        )

    if step is BookingStep.time:
        if not is_valid_appointment_time(text):
            return BookingTransition(
                reply=f"Please choose from the available time slots. {suggest_appointment_times(today)}",
                session=session,
            )
        slot = normalize_appointment_time(text)
        completed = replace(session, appointment_time=slot)
        return BookingTransition(
            reply="",
            session=completed,
            completed_request=AppointmentRequest(
                name=completed.name or "",
                email=completed.email or "",
                phone=completed.phone or "",
                purpose=completed.purpose or "",
                appointment_time=slot,
            ),
        )

    raise ValueError(f"Unknown booking step: {step!r}")


class BookingUseCase:
    def __init__(
        self,
        sessions: BookingSessionStorePort,
        appointments: AppointmentStorePort,
        timezone: ZoneInfo,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._sessions = sessions
        self._appointments = appointments
        self._timezone = timezone
        self._clock = clock or (lambda: datetime.now(self._timezone))
        self._logger = logging.getLogger(__name__)

    def advance(self, session_id: str, message: str, session: BookingSession) -> BookingResult:
        """
        Apply one user message to a booking session and store the outcome.

        Incomplete sessions are written back to the session store. On the
        final step the session is removed whether or not the appointment
        could be recorded; a failed write ends the attempt with an apology.
        """
        self._logger.info(
            "Booking step", extra={"session_id": session_id, "step": session.step.value}
        )
        today = self._clock().date()
        transition = advance_session(session, message, today)

        if transition.completed_request is None:
            self._sessions.put(session_id, transition.session)
            return BookingResult(reply=transition.reply, is_complete=False)

        self._sessions.delete(session_id)
        try:
            appointment = self._appointments.record(transition.completed_request)
        except Exception as e:
            self._logger.exception(
                "Failed to record appointment", extra={"session_id": session_id, "error": str(e)}
            )
            return BookingResult(reply=BOOKING_FAILED_REPLY, is_complete=True)

        self._logger.info(
            "Appointment scheduled",
            extra={"session_id": session_id, "appointment_id": appointment.id},
        )
        return BookingResult(reply=_confirmation_text(appointment), is_complete=True, appointment=appointment)


def _confirmation_text(appointment: Appointment) -> str:
    return (
        "Perfect! Your appointment has been scheduled successfully. Here's a summary:\n"
        "\n"
        f"Name: {appointment.name}\n"
        f"Email: {appointment.email}\n"
        f"Phone: {appointment.phone}\n"
        f"Purpose: {appointment.purpose}\n"
        f"Time: {appointment.appointment_time} on {format_long_date(appointment.appointment_date)}\n"
        "\n"
        "Your appointment has been saved. Is there anything else I can help you with?"
    )
