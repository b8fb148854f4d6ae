"""
Tests for the HTTP endpoints.
"""

from __future__ import annotations

from app.application.use_cases.booking import BOOKING_FAILED_REPLY, BookingUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.wiring.dependencies import get_appointment_store, get_handle_chat_message_use_case

from conftest import UTC, FailingAppointmentStore, frozen_clock


def test_root_and_liveness(client):
    index = client.get("/")
    assert index.status_code == 200
    assert index.json()["endpoints"]["chat"] == "POST /chat"

    assert client.get("/test").json() == {"message": "Server is working!"}


def test_appointments_empty_on_fresh_store(client):
    response = client.get("/appointments")
    assert response.status_code == 200
    assert response.json() == {"appointments": []}


def test_chat_rejects_blank_message(client):
    response = client.post("/chat", json={"message": "   ", "sessionId": "s1"})
    assert response.status_code == 400
    assert response.json() == {"error": "Message cannot be empty"}

    response = client.post("/chat", json={"sessionId": "s1"})
    assert response.status_code == 400
    assert response.json() == {"error": "Message cannot be empty"}


def test_chat_rejects_malformed_body(client):
    response = client.post("/chat", json={"message": ["not", "text"]})
    assert response.status_code == 400
    assert "error" in response.json()


def test_chat_routes_plain_message_to_llm(client, fake_llm):
    response = client.post("/chat", json={"message": "Hello!", "sessionId": "s1"})
    assert response.status_code == 200
    assert response.json() == {"response": "LLM: Hello!"}
    assert len(fake_llm.calls) == 1


def test_chat_without_session_id_still_answers(client):
    response = client.post("/chat", json={"message": "Hello!"})
    assert response.status_code == 200
    assert response.json()["response"] == "LLM: Hello!"


def test_chat_upstream_failure_returns_500(client, fake_llm):
    fake_llm.fail = True
    response = client.post("/chat", json={"message": "Hello!", "sessionId": "s1"})
    assert response.status_code == 500
    assert "error" in response.json()


def test_booking_flow_over_http(client):
    messages = [
        "I want to book an appointment",
        "Alice Smith",
        "alice@example.com",
        "+1-234-567-8900",
        'Meeting, "urgent"',
        "11:00 am",
    ]
    replies = [
        client.post("/chat", json={"message": m, "sessionId": "widget-1"}).json()["response"]
        for m in messages
    ]

    assert "What should I call you?" in replies[0]
    assert "Available slots for Monday, January 5, 2026" in replies[4]
    assert "scheduled successfully" in replies[5]

    appointments = client.get("/appointments").json()["appointments"]
    assert len(appointments) == 1
    apt = appointments[0]
    assert apt["name"] == "Alice Smith"
    assert apt["email"] == "alice@example.com"
    assert apt["phone"] == "+1-234-567-8900"
    assert apt["purpose"] == 'Meeting, "urgent"'
    assert apt["appointmentTime"] == "11:00 AM"
    assert apt["date"] == "2026-01-05"
    assert apt["status"] == "Scheduled"
    assert apt["createdAt"].startswith("2026-01-02T10:00:00")
    assert apt["id"]


def test_chat_with_file_summarizes_text(client, conversation_store):
    response = client.post(
        "/chat-with-file",
        files={"file": ("notes.txt", b"quarterly numbers", "text/plain")},
        data={"message": "", "sessionId": "s1"},
    )
    assert response.status_code == 200
    assert response.json() == {"response": "Summary of notes.txt: quarterly numbers"}
    assert conversation_store.get_history("s1")[0].text.startswith("[Uploaded file: notes.txt]")


def test_chat_with_file_requires_file(client):
    response = client.post("/chat-with-file", data={"message": "hi", "sessionId": "s1"})
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_chat_with_file_rejects_binary(client):
    response = client.post(
        "/chat-with-file",
        files={"file": ("image.png", b"\x89PNG\r\n\x1a\n\xff\xfe", "image/png")},
        data={"sessionId": "s1"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Could not read file. Please ensure it is a text file."}


def test_chat_with_file_enforces_size_limit(client):
    # the client fixture caps uploads at 64 bytes
    response = client.post(
        "/chat-with-file",
        files={"file": ("big.txt", b"x" * 100, "text/plain")},
        data={"sessionId": "s1"},
    )
    assert response.status_code == 400
    assert "exceeds the 64 Bytes limit" in response.json()["error"]


def test_chat_with_file_upstream_failure_returns_500(client, fake_llm):
    fake_llm.fail = True
    response = client.post(
        "/chat-with-file",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        data={"sessionId": "s1"},
    )
    assert response.status_code == 500
    assert "error" in response.json()


def test_appointments_storage_failure_returns_500(client):
    from app.main import app

    app.dependency_overrides[get_appointment_store] = lambda: FailingAppointmentStore()

    response = client.get("/appointments")
    assert response.status_code == 500
    assert response.json() == {"error": "Error reading appointments"}


def test_booking_with_failing_store_apologizes_and_closes_form(client, session_store, generate_reply):
    from app.main import app

    booking = BookingUseCase(
        sessions=session_store,
        appointments=FailingAppointmentStore(),
        timezone=UTC,
        clock=frozen_clock,
    )
    gateway = HandleChatMessageUseCase(sessions=session_store, booking=booking, generate_reply=generate_reply)
    app.dependency_overrides[get_handle_chat_message_use_case] = lambda: gateway

    messages = ["book an appointment", "Alice Smith", "alice@example.com", "1234567890", "Consultation", "2pm"]
    responses = [client.post("/chat", json={"message": m, "sessionId": "s-fail"}) for m in messages]

    assert all(r.status_code == 200 for r in responses)
    assert responses[-1].json() == {"response": BOOKING_FAILED_REPLY}
    assert session_store.get("s-fail") is None
