from __future__ import annotations

import re

VALID_APPOINTMENT_TIMES = (
    "9:00 AM",
    "9:30 AM",
    "10:00 AM",
    "10:30 AM",
    "11:00 AM",
    "11:30 AM",
    "12:00 PM",
    "12:30 PM",
    "1:00 PM",
    "1:30 PM",
    "2:00 PM",
    "2:30 PM",
    "3:00 PM",
    "3:30 PM",
    "4:00 PM",
    "4:30 PM",
)

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_RE = re.compile(r"\+?[0-9]+")
_PHONE_SEPARATORS_RE = re.compile(r"[\s\-()]")
_TIME_RE = re.compile(r"(\d{1,2}):?(\d{2})?\s*(AM|PM)")


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    cleaned = _PHONE_SEPARATORS_RE.sub("", phone)
    return len(cleaned) >= 10 and _PHONE_RE.fullmatch(cleaned) is not None


def normalize_appointment_time(text: str) -> str:
    """
    Canonicalize a time label to "H:MM AM/PM".

    Whitespace is collapsed and the text upper-cased, then the first
    "H[:MM] AM/PM" occurrence is rewritten ("9am" -> "9:00 AM",
    "09:30pm" -> "9:30 PM").
    Text without such an occurrence comes back otherwise unchanged, so
    "9.00 AM" or "9:00 XM" never turn into a slot label.
    """
    collapsed = " ".join(text.split()).upper()

    def _canonical(match: re.Match[str]) -> str:
        hour, minute, period = match.groups()
        return f"{int(hour)}:{minute or '00'} {period}"

    return _TIME_RE.sub(_canonical, collapsed, count=1)


def is_valid_appointment_time(text: str) -> bool:
    return normalize_appointment_time(text) in VALID_APPOINTMENT_TIMES
