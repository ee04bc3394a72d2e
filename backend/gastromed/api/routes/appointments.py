"""Appointment Routes: calendar listing, today's agenda and appointment CRUD.

Invariants:
    - startDate/endDate bounds are each optional and inclusive
    - Naive query timestamps are read in the clinic timezone
    - /today is declared before /{appointment_id}
    - DELETE is a hard delete
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import get_appointment_repository, require
from gastromed.config import Settings, get_settings
from gastromed.core.clinic_time import normalize_timestamp
from gastromed.core.errors import ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import AppointmentRepository
from gastromed.schemas.appointment import (
    AppointmentCreate, AppointmentDetail, AppointmentResponse, AppointmentUpdate,
)
from gastromed.schemas.base import MessageResponse

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


@router.get(
    "", response_model=list[AppointmentDetail],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_appointments(
    start_date: datetime | None = Query(None, alias="startDate"),
    end_date: datetime | None = Query(None, alias="endDate"),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    settings: Settings = Depends(get_settings),
):
    zone = settings.clinic_zone
    return await appointments.list(
        start=normalize_timestamp(start_date, zone) if start_date else None,
        end=normalize_timestamp(end_date, zone) if end_date else None,
    )


@router.get(
    "/today", response_model=list[AppointmentDetail],
    dependencies=[Depends(require(Capability.READ))],
)
async def todays_appointments(
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    return await appointments.list_today()


@router.get(
    "/{appointment_id}", response_model=AppointmentDetail,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_appointment(
    appointment_id: str,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    appointment = await appointments.get_by_id(appointment_id)
    if appointment is None:
        raise ResourceNotFoundError("Appointment", appointment_id)
    return appointment


@router.post(
    "", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.MANAGE_APPOINTMENTS))],
)
async def create_appointment(
    body: AppointmentCreate,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    return await appointments.create(body.model_dump())


@router.patch(
    "/{appointment_id}", response_model=AppointmentResponse,
    dependencies=[Depends(require(Capability.MANAGE_APPOINTMENTS))],
)
async def update_appointment(
    appointment_id: str,
    body: AppointmentUpdate,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    appointment = await appointments.update(
        appointment_id, body.model_dump(exclude_unset=True),
    )
    if appointment is None:
        raise ResourceNotFoundError("Appointment", appointment_id)
    return appointment


@router.delete(
    "/{appointment_id}", response_model=MessageResponse,
    dependencies=[Depends(require(Capability.MANAGE_APPOINTMENTS))],
)
async def delete_appointment(
    appointment_id: str,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    if not await appointments.delete(appointment_id):
        raise ResourceNotFoundError("Appointment", appointment_id)
    return MessageResponse(message="Appointment deleted successfully")
