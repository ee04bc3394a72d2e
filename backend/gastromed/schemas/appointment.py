"""Appointment Schemas: scheduling input and the flat/enriched appointment shapes."""

from pydantic import Field

from gastromed.core.domain_types import AppointmentStatus, AppointmentType
from gastromed.schemas.base import (
    CamelModel, OptionalTimestamp, ResponseModel, Timestamp, UtcTimestamp,
    partial_model,
)
from gastromed.schemas.patient import PatientResponse
from gastromed.schemas.user import UserResponse


class AppointmentCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    doctor_id: str = Field(min_length=1)
    appointment_date: Timestamp
    duration: int = Field(30, gt=0)
    type: AppointmentType
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    reason: str
    notes: str | None = None
    checked_in_at: OptionalTimestamp = None
    completed_at: OptionalTimestamp = None
    created_by: str = Field(min_length=1)


AppointmentUpdate = partial_model(AppointmentCreate, "AppointmentUpdate")


class AppointmentResponse(ResponseModel):
    id: str
    patient_id: str
    doctor_id: str
    appointment_date: UtcTimestamp
    duration: int
    type: AppointmentType
    status: AppointmentStatus
    reason: str
    notes: str | None = None
    checked_in_at: UtcTimestamp | None = None
    completed_at: UtcTimestamp | None = None
    created_by: str
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class AppointmentWithDoctor(AppointmentResponse):
    doctor: UserResponse


class AppointmentDetail(AppointmentWithDoctor):
    patient: PatientResponse
