from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.appointment import Appointment


class ChatRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    session_id: str | None = Field(default=None, alias="sessionId")


class ChatResponseSchema(BaseModel):
    response: str


class ErrorSchema(BaseModel):
    error: str


class AppointmentSchema(BaseModel):
    id: str
    date: str
    name: str
    email: str
    phone: str
    purpose: str
    appointment_time: str = Field(serialization_alias="appointmentTime")
    status: str
    created_at: str = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            id=appointment.id,
            date=appointment.appointment_date.isoformat(),
            name=appointment.name,
            email=appointment.email,
            phone=appointment.phone,
            purpose=appointment.purpose,
            appointment_time=appointment.appointment_time,
            status=appointment.status,
            created_at=appointment.created_at.isoformat(timespec="milliseconds"),
        )


class AppointmentListSchema(BaseModel):
    appointments: list[AppointmentSchema] = Field(default_factory=list)
