from __future__ import annotations

import csv
import logging
import threading
from abc import abstractmethod
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

from app.application.exceptions import AppointmentStorageError
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.utils.slots import next_business_day
from app.domain.entities.appointment import (
    DEFAULT_PURPOSE,
    STATUS_SCHEDULED,
    Appointment,
    AppointmentRequest,
)

CSV_HEADER = ["Date", "Name", "Email", "Phone", "Purpose", "Appointment Time", "Appointment Date", "Status"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def appointment_id_for(created_at: datetime) -> str:
    """Epoch milliseconds of the creation time, as a string."""
    return str((created_at - _EPOCH) // _ONE_MS)


class _AppointmentStoreBase(AppointmentStorePort):
    """Shared record() logic; subclasses provide _append and list_appointments."""

    def __init__(self, timezone: ZoneInfo, clock: Callable[[], datetime] | None = None) -> None:
        self._timezone = timezone
        self._clock = clock or (lambda: datetime.now(self._timezone))
        self._last_created_at: datetime | None = None
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def record(self, request: AppointmentRequest) -> Appointment:
        with self._lock:
            created_at = self._next_created_at()
            appointment = Appointment(
                id=appointment_id_for(created_at),
                appointment_date=next_business_day(created_at.date()),
                name=request.name,
                email=request.email,
                phone=request.phone,
                purpose=request.purpose.strip() or DEFAULT_PURPOSE,
                appointment_time=request.appointment_time,
                created_at=created_at,
                status=STATUS_SCHEDULED,
            )
            self._append(appointment)
        self._logger.info("Appointment recorded", extra={"appointment_id": appointment.id})
        return appointment

    def _next_created_at(self) -> datetime:
        # caller holds self._lock; millisecond precision, strictly increasing so ids stay unique
        now = self._clock()
        now = now.replace(microsecond=now.microsecond // 1000 * 1000)
        if self._last_created_at is not None and now <= self._last_created_at:
            now = self._last_created_at + _ONE_MS
        self._last_created_at = now
        return now

    @abstractmethod
    def _append(self, appointment: Appointment) -> None:
        """Persist one appointment. Called with self._lock held."""
        raise NotImplementedError


class MemoryAppointmentStore(_AppointmentStoreBase):
    def __init__(self, timezone: ZoneInfo, clock: Callable[[], datetime] | None = None) -> None:
        super().__init__(timezone=timezone, clock=clock)
        self._appointments: list[Appointment] = []

    def _append(self, appointment: Appointment) -> None:
        self._appointments.append(appointment)

    def list_appointments(self) -> list[Appointment]:
        with self._lock:
            snapshot = list(self._appointments)
        return sorted(snapshot, key=lambda a: a.created_at, reverse=True)


class CsvAppointmentStore(_AppointmentStoreBase):
    def __init__(
        self,
        path: str = "appointments.csv",
        timezone: ZoneInfo = ZoneInfo("UTC"),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(timezone=timezone, clock=clock)
        self._path = Path(path)

    def _append(self, appointment: Appointment) -> None:
        try:
            needs_header = not self._path.exists() or self._path.stat().st_size == 0
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n")
                if needs_header:
                    writer.writerow(CSV_HEADER)
                writer.writerow(_to_row(appointment))
        except OSError as e:
            raise AppointmentStorageError(f"Could not write {self._path}: {e}") from e

    def list_appointments(self) -> list[Appointment]:
        with self._lock:
            if not self._path.exists():
                return []
            try:
                with open(self._path, "r", newline="", encoding="utf-8") as f:
                    rows = list(csv.DictReader(f))
            except OSError as e:
                raise AppointmentStorageError(f"Could not read {self._path}: {e}") from e

        appointments: list[Appointment] = []
        for line_no, row in enumerate(rows, start=2):
            try:
                appointments.append(_from_row(row))
            except (KeyError, TypeError, ValueError) as e:
                self._logger.warning(
                    "Skipping malformed appointment row",
                    extra={"reason": f"line {line_no}: {e}"},
                )
        return sorted(appointments, key=lambda a: a.created_at, reverse=True)


def _to_row(appointment: Appointment) -> list[str]:
    return [
        appointment.created_at.isoformat(timespec="milliseconds"),
        appointment.name,
        appointment.email,
        appointment.phone,
        appointment.purpose,
        appointment.appointment_time,
        appointment.appointment_date.isoformat(),
        appointment.status,
    ]


def _from_row(row: dict[str, str]) -> Appointment:
    created_at = datetime.fromisoformat(row["Date"])
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Appointment(
        id=appointment_id_for(created_at),
        appointment_date=date.fromisoformat(row["Appointment Date"]),
        name=row["Name"],
        email=row["Email"],
        phone=row["Phone"],
        purpose=row["Purpose"],
        appointment_time=row["Appointment Time"],
        created_at=created_at,
        status=row["Status"] or STATUS_SCHEDULED,
    )
