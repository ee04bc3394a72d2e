"""Patient Evolution Schemas: clinical progress-note input and shapes."""

from pydantic import Field

from gastromed.schemas.appointment import AppointmentResponse
from gastromed.schemas.base import (
    CamelModel, OptionalRef, ResponseModel, Timestamp, UtcTimestamp,
    partial_model, utcnow,
)
from gastromed.schemas.patient import PatientResponse
from gastromed.schemas.user import UserResponse


class Prescription(CamelModel):
    medication: str
    dosage: str = ""
    frequency: str = ""
    duration: str = ""


class EvolutionCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    appointment_id: OptionalRef = None
    doctor_id: str = Field(min_length=1)
    evolution_date: Timestamp = Field(default_factory=utcnow)
    chief_complaint: str | None = None
    history_of_present_illness: str | None = None
    physical_examination: str | None = None
    assessment: str | None = None
    plan: str | None = None
    prescriptions: list[Prescription] | None = Field(default_factory=list)
    next_appointment: str | None = None
    observations: str | None = None


EvolutionUpdate = partial_model(EvolutionCreate, "EvolutionUpdate")


class EvolutionResponse(ResponseModel):
    id: str
    patient_id: str
    appointment_id: str | None = None
    doctor_id: str
    evolution_date: UtcTimestamp
    chief_complaint: str | None = None
    history_of_present_illness: str | None = None
    physical_examination: str | None = None
    assessment: str | None = None
    plan: str | None = None
    prescriptions: list[Prescription] | None = None
    next_appointment: str | None = None
    observations: str | None = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class EvolutionDetail(EvolutionResponse):
    """Enriched shape: appointment is null when the note is not tied to a visit."""
    patient: PatientResponse
    doctor: UserResponse
    appointment: AppointmentResponse | None = None
