"""Patient Schemas: intake/update input and the stored patient shape.

Invariants:
    - first_name, last_name, date_of_birth, phone are required on create
    - date_of_birth is normalized to a YYYY-MM-DD string
"""

from pydantic import Field

from gastromed.schemas.base import (
    CamelModel, IsoDate, ResponseModel, UtcTimestamp, partial_model,
)


class PatientCreate(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: IsoDate
    phone: str = Field(min_length=1)
    email: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    insurance_primary: str | None = None
    insurance_policy_number: str | None = None
    insurance_group_number: str | None = None
    medical_history: list[str] | None = Field(default_factory=list)
    allergies: list[str] | None = Field(default_factory=list)
    medications: list[str] | None = Field(default_factory=list)
    notes: str | None = None
    is_active: bool = True


PatientUpdate = partial_model(PatientCreate, "PatientUpdate")


class PatientResponse(ResponseModel):
    id: str
    first_name: str
    last_name: str
    date_of_birth: str
    phone: str
    email: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    insurance_primary: str | None = None
    insurance_policy_number: str | None = None
    insurance_group_number: str | None = None
    medical_history: list[str] | None = None
    allergies: list[str] | None = None
    medications: list[str] | None = None
    notes: str | None = None
    is_active: bool
    created_at: UtcTimestamp
    updated_at: UtcTimestamp
