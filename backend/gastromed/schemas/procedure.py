"""Procedure Schemas: procedure input and the flat/enriched procedure shapes."""

from pydantic import Field

from gastromed.core.domain_types import ProcedureStatus
from gastromed.schemas.appointment import AppointmentResponse
from gastromed.schemas.base import (
    CamelModel, OptionalTimestamp, ResponseModel, Timestamp, UtcTimestamp,
    partial_model,
)
from gastromed.schemas.patient import PatientResponse
from gastromed.schemas.user import UserResponse


class ProcedureMedication(CamelModel):
    name: str
    dosage: str = ""
    instructions: str = ""


class ProcedureCreate(CamelModel):
    appointment_id: str = Field(min_length=1)
    patient_id: str = Field(min_length=1)
    doctor_id: str = Field(min_length=1)
    procedure_type: str = Field(min_length=1)
    status: ProcedureStatus = ProcedureStatus.SCHEDULED
    scheduled_date: Timestamp
    start_time: OptionalTimestamp = None
    end_time: OptionalTimestamp = None
    findings: str | None = None
    recommendations: str | None = None
    complications: str | None = None
    medications: list[ProcedureMedication] | None = Field(default_factory=list)
    follow_up_required: bool = False
    follow_up_instructions: str | None = None
    pathology_ordered: bool = False
    pathology_results: str | None = None


ProcedureUpdate = partial_model(ProcedureCreate, "ProcedureUpdate")


class ProcedureResponse(ResponseModel):
    id: str
    appointment_id: str
    patient_id: str
    doctor_id: str
    procedure_type: str
    status: ProcedureStatus
    scheduled_date: UtcTimestamp
    start_time: UtcTimestamp | None = None
    end_time: UtcTimestamp | None = None
    findings: str | None = None
    recommendations: str | None = None
    complications: str | None = None
    medications: list[ProcedureMedication] | None = None
    follow_up_required: bool
    follow_up_instructions: str | None = None
    pathology_ordered: bool
    pathology_results: str | None = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class ProcedureWithPatient(ProcedureResponse):
    """List shape: patient and doctor joined."""
    patient: PatientResponse
    doctor: UserResponse


class ProcedureWithAppointment(ProcedureResponse):
    """Per-patient shape: doctor and appointment joined."""
    doctor: UserResponse
    appointment: AppointmentResponse


class ProcedureDetail(ProcedureWithPatient):
    appointment: AppointmentResponse
