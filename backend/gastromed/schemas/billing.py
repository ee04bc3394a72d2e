"""Billing Schemas: billing input and the billing shapes.

Invariants:
    - amount, patient_responsibility and due_date are required on create
    - billing_date defaults to now when absent on create
    - patient_responsibility is taken as given, never recomputed
"""

from decimal import Decimal

from pydantic import Field

from gastromed.core.domain_types import BillingStatus
from gastromed.schemas.base import (
    CamelModel, MoneyAmount, OptionalRef, OptionalTimestamp, ResponseModel,
    Timestamp, UtcTimestamp, partial_model, utcnow,
)
from gastromed.schemas.patient import PatientResponse


class BillingCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    appointment_id: OptionalRef = None
    procedure_id: OptionalRef = None
    description: str
    amount: MoneyAmount
    insurance_covered: MoneyAmount | None = Decimal("0.00")
    patient_responsibility: MoneyAmount
    status: BillingStatus = BillingStatus.PENDING
    billing_date: Timestamp = Field(default_factory=utcnow)
    due_date: Timestamp
    paid_date: OptionalTimestamp = None
    payment_method: str | None = None
    notes: str | None = None


BillingUpdate = partial_model(BillingCreate, "BillingUpdate")


class BillingResponse(ResponseModel):
    id: str
    patient_id: str
    appointment_id: str | None = None
    procedure_id: str | None = None
    description: str
    amount: Decimal
    insurance_covered: Decimal | None = None
    patient_responsibility: Decimal
    status: BillingStatus
    billing_date: UtcTimestamp
    due_date: UtcTimestamp
    paid_date: UtcTimestamp | None = None
    payment_method: str | None = None
    notes: str | None = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class BillingWithPatient(BillingResponse):
    patient: PatientResponse
