from abc import ABC, abstractmethod

from app.domain.entities.appointment import Appointment, AppointmentRequest


class AppointmentStorePort(ABC):
    @abstractmethod
    def record(self, request: AppointmentRequest) -> Appointment:
        """
        Persist a completed booking.

        The store resolves the appointment date (next business day), assigns
        the id and creation timestamp, and defaults a blank purpose.

        Raises:
            AppointmentStorageError: the backing storage could not be written
        """
        raise NotImplementedError

    @abstractmethod
    def list_appointments(self) -> list[Appointment]:
        """Return every recorded appointment, newest created first."""
        raise NotImplementedError
