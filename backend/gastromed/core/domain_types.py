"""Domain Types: enumerated status/type domains shared by ORM models and schemas.

Invariants:
    - Every enumerated column is validated against exactly one Enum here
    - Enum values are the wire values (snake_case strings)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Stored as plain strings in the database: validation lives in the schema layer
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
PatientId = NewType("PatientId", str)
AppointmentId = NewType("AppointmentId", str)
ProcedureId = NewType("ProcedureId", str)
BillingId = NewType("BillingId", str)
EvolutionId = NewType("EvolutionId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Staff roles. Doctors own clinical records; receptionists run the front desk."""
    DOCTOR = "doctor"
    RECEPTIONIST = "receptionist"


class AppointmentType(str, Enum):
    CONSULTATION = "consultation"
    ENDOSCOPY = "endoscopy"


class AppointmentStatus(str, Enum):
    """Appointment lifecycle.

    Nominal flow: scheduled -> confirmed -> checked_in -> in_progress -> completed,
    with cancelled/no_show reachable from any non-terminal state. Transitions are
    not enforced: any value may be written from any prior state.
    """
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class ProcedureStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BillingStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"
