from __future__ import annotations

from datetime import date, timedelta

SUGGESTED_APPOINTMENT_TIMES = ("9:00 AM", "10:00 AM", "11:00 AM", "2:00 PM", "3:00 PM", "4:00 PM")

_WEEKEND = (5, 6)


def next_business_day(today: date) -> date:
    """Return the first weekday strictly after `today`."""
    candidate = today + timedelta(days=1)
    while candidate.weekday() in _WEEKEND:
        candidate += timedelta(days=1)
    return candidate


def format_long_date(value: date) -> str:
    # "Monday, January 5, 2026"; built by hand so the day has no zero padding on any platform
    return f"{value.strftime('%A')}, {value.strftime('%B')} {value.day}, {value.year}"


def suggest_appointment_times(today: date) -> str:
    day = format_long_date(next_business_day(today))
    times = ", ".join(SUGGESTED_APPOINTMENT_TIMES)
    return f"Available slots for {day}: {times}. Please let me know which time works best for you."
