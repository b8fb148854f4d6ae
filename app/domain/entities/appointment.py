from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

DEFAULT_PURPOSE = "General consultation"
STATUS_SCHEDULED = "Scheduled"


@dataclass(frozen=True)
class AppointmentRequest:
    name: str
    email: str
    phone: str
    purpose: str
    appointment_time: str


@dataclass(frozen=True)
class Appointment:
    id: str
    appointment_date: date
    name: str
    email: str
    phone: str
    purpose: str
    appointment_time: str
    created_at: datetime
    status: str = STATUS_SCHEDULED
