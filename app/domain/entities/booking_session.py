from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BookingStep(str, Enum):
    start = "start"
    name = "name"
    email = "email"
    phone = "phone"
    purpose = "purpose"
    time = "time"


@dataclass(frozen=True)
class BookingSession:
    step: BookingStep = BookingStep.start
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    purpose: str | None = None
    appointment_time: str | None = None
