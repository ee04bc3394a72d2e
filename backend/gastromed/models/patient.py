"""Patient ORM: identity, contact, insurance and clinical background.

Invariants:
    - first_name, last_name, date_of_birth, phone are non-nullable
    - date_of_birth is an ISO date string (YYYY-MM-DD), not a timestamp
    - medical_history, allergies, medications are ordered lists of free text
    - Patients are soft-deleted (is_active=False), never removed
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gastromed.db.base import Base
from gastromed.db.types import JSONDocument


class Patient(Base):
    __tablename__ = "patients"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_birth: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    emergency_contact: Mapped[str | None] = mapped_column(Text, nullable=True)
    emergency_phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    insurance_primary: Mapped[str | None] = mapped_column(Text, nullable=True)
    insurance_policy_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    insurance_group_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    medical_history: Mapped[list | None] = mapped_column(
        JSONDocument, nullable=True, default=list,
    )
    allergies: Mapped[list | None] = mapped_column(
        JSONDocument, nullable=True, default=list,
    )
    medications: Mapped[list | None] = mapped_column(
        JSONDocument, nullable=True, default=list,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
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
