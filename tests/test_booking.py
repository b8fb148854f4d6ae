"""
Tests for the appointment booking dialogue.
"""

from __future__ import annotations

from datetime import date

import pytest

from app.application.use_cases.booking import BOOKING_FAILED_REPLY, BookingUseCase, advance_session
from app.domain.entities.booking_session import BookingSession, BookingStep

from conftest import UTC, FailingAppointmentStore, frozen_clock

TODAY = date(2026, 1, 2)

VALID_ANSWERS = ["Alice Smith", "alice@example.com", "+1-234-567-8900", "Consultation", "10am"]


def test_start_always_asks_for_name():
    transition = advance_session(BookingSession(), "book an appointment", TODAY)
    assert transition.session == BookingSession(step=BookingStep.name)
    assert "What should I call you?" in transition.reply
    assert transition.completed_request is None


def test_name_step_accepts_two_characters():
    transition = advance_session(BookingSession(step=BookingStep.name), "  Al  ", TODAY)
    assert transition.session.step is BookingStep.email
    assert transition.session.name == "Al"
    assert "Nice to meet you, Al!" in transition.reply


def test_purpose_step_lists_suggested_slots():
    session = BookingSession(step=BookingStep.purpose, name="Al", email="al@example.com", phone="1234567890")
    transition = advance_session(session, "", TODAY)
    assert transition.session.step is BookingStep.time
    assert transition.session.purpose == ""
    assert "Monday, January 5, 2026" in transition.reply


@pytest.mark.parametrize(
    "session,bad_input",
    [
        (BookingSession(step=BookingStep.name), "A"),
        (BookingSession(step=BookingStep.name), "   "),
        (BookingSession(step=BookingStep.email, name="Al"), "not-an-email"),
        (BookingSession(step=BookingStep.phone, name="Al", email="al@example.com"), "12345"),
        (
            BookingSession(step=BookingStep.time, name="Al", email="al@example.com", phone="1234567890", purpose="x"),
            "25:00 AM",
        ),
    ],
)
def test_invalid_input_leaves_session_unchanged(session, bad_input, booking, session_store):
    session_store.put("s1", session)
    result = booking.advance("s1", bad_input, session)
    assert result.is_complete is False
    assert result.reply
    assert session_store.get("s1") == session


def test_invalid_time_reprompts_with_suggestions():
    session = BookingSession(step=BookingStep.time, name="Al", email="al@example.com", phone="1234567890", purpose="x")
    transition = advance_session(session, "tomorrow morning", TODAY)
    assert transition.session == session
    assert transition.reply.startswith("Please choose from the available time slots.")


def test_five_valid_answers_complete_booking(booking, session_store, appointment_store):
    session = BookingSession()
    booking.advance("s1", "book an appointment", session)

    results = []
    for answer in VALID_ANSWERS:
        results.append(booking.advance("s1", answer, session_store.get("s1")))

    assert [r.is_complete for r in results] == [False, False, False, False, True]
    assert not session_store.has("s1")

    appointment = results[-1].appointment
    assert appointment is not None
    assert appointment.name == "Alice Smith"
    assert appointment.email == "alice@example.com"
    assert appointment.phone == "+1-234-567-8900"
    assert appointment.purpose == "Consultation"
    assert appointment.appointment_time == "10:00 AM"
    assert appointment.appointment_date == date(2026, 1, 5)
    assert appointment.status == "Scheduled"
    assert appointment_store.list_appointments() == [appointment]
    assert "10:00 AM on Monday, January 5, 2026" in results[-1].reply


def test_unsuggested_but_valid_time_is_accepted(booking, appointment_store):
    session = BookingSession(step=BookingStep.time, name="Al", email="al@example.com", phone="1234567890", purpose="")
    result = booking.advance("s1", "9:30 am", session)
    assert result.is_complete
    assert result.appointment.appointment_time == "9:30 AM"
    assert result.appointment.purpose == "General consultation"


def test_storage_failure_ends_booking(session_store):
    use_case = BookingUseCase(
        sessions=session_store,
        appointments=FailingAppointmentStore(),
        timezone=UTC,
        clock=frozen_clock,
    )
    session = BookingSession(step=BookingStep.time, name="Al", email="al@example.com", phone="1234567890", purpose="x")
    session_store.put("s1", session)

    result = use_case.advance("s1", "2:00 PM", session)

    assert result.is_complete is True
    assert result.reply == BOOKING_FAILED_REPLY
    assert result.appointment is None
    assert not session_store.has("s1")
