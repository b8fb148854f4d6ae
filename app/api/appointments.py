from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.schemas import AppointmentListSchema, AppointmentSchema, ErrorSchema
from app.application.exceptions import AppointmentStorageError
from app.application.ports.appointment_store import AppointmentStorePort
from app.wiring.dependencies import get_appointment_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/appointments",
    response_model=AppointmentListSchema,
    responses={500: {"model": ErrorSchema}},
)
def list_appointments(store: AppointmentStorePort = Depends(get_appointment_store)):
    try:
        appointments = store.list_appointments()
    except AppointmentStorageError as e:
        logger.exception("Error reading appointments", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Error reading appointments")

    return AppointmentListSchema(appointments=[AppointmentSchema.from_entity(a) for a in appointments])
