from __future__ import annotations

BOOKING_INTENT_KEYWORDS = (
    "call me",
    "book an appointment",
    "schedule appointment",
    "book appointment",
    "appointment",
    "schedule a call",
    "schedule meeting",
    "need a call",
    "want to book",
    "set up meeting",
    "arrange a call",
)


def is_booking_request(text: str) -> bool:
    """
    Check if the user asks to book an appointment or be called back.
    Case-insensitive substring match against BOOKING_INTENT_KEYWORDS.
    """
    normalized = text.lower()
    return any(keyword in normalized for keyword in BOOKING_INTENT_KEYWORDS)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()
