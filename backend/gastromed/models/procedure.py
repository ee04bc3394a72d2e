"""Procedure ORM: an endoscopic or diagnostic procedure realized from an appointment.

Invariants:
    - appointment_id, patient_id, doctor_id reference existing rows (FK)
    - procedure_type is free text (the UI offers a fixed list)
    - medications is a list of {name, dosage, instructions}
    - Procedures are never deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gastromed.db.base import Base
from gastromed.db.types import JSONDocument


class Procedure(Base):
    __tablename__ = "procedures"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    appointment_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("appointments.id"), nullable=False,
    )
    patient_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("patients.id"), nullable=False,
    )
    doctor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False,
    )
    procedure_type: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="scheduled",
    )
    scheduled_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    start_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    end_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    findings: Mapped[str | None] = mapped_column(Text, nullable=True)
    recommendations: Mapped[str | None] = mapped_column(Text, nullable=True)
    complications: Mapped[str | None] = mapped_column(Text, nullable=True)
    medications: Mapped[list | None] = mapped_column(
        JSONDocument, nullable=True, default=list,
    )
    follow_up_required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    follow_up_instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    pathology_ordered: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    pathology_results: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    appointment: Mapped["Appointment"] = relationship("Appointment", lazy="raise")
    patient: Mapped["Patient"] = relationship("Patient", lazy="raise")
    doctor: Mapped["User"] = relationship("User", lazy="raise")
