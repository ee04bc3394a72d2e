"""Initial schema: users, patients, appointments, procedures, billing, patient_evolutions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_DOC = sa.JSON().with_variant(JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("username", sa.Text, nullable=False, unique=True),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("full_name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False, unique=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="receptionist"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "patients",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("date_of_birth", sa.Text, nullable=False),
        sa.Column("phone", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("emergency_contact", sa.Text, nullable=True),
        sa.Column("emergency_phone", sa.Text, nullable=True),
        sa.Column("insurance_primary", sa.Text, nullable=True),
        sa.Column("insurance_policy_number", sa.Text, nullable=True),
        sa.Column("insurance_group_number", sa.Text, nullable=True),
        sa.Column("medical_history", JSON_DOC, nullable=True),
        sa.Column("allergies", JSON_DOC, nullable=True),
        sa.Column("medications", JSON_DOC, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "appointments",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("patient_id", sa.String(36), sa.ForeignKey("patients.id"), nullable=False),
        sa.Column("doctor_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("appointment_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duration", sa.Integer, nullable=False, server_default="30"),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="scheduled"),
        sa.Column("reason", sa.Text, nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("checked_in_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_appointments_appointment_date", "appointments", ["appointment_date"])
    op.create_index("ix_appointments_patient_id", "appointments", ["patient_id"])

    op.create_table(
        "procedures",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("appointment_id", sa.String(36), sa.ForeignKey("appointments.id"), nullable=False),
        sa.Column("patient_id", sa.String(36), sa.ForeignKey("patients.id"), nullable=False),
        sa.Column("doctor_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("procedure_type", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="scheduled"),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("findings", sa.Text, nullable=True),
        sa.Column("recommendations", sa.Text, nullable=True),
        sa.Column("complications", sa.Text, nullable=True),
        sa.Column("medications", JSON_DOC, nullable=True),
        sa.Column("follow_up_required", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("follow_up_instructions", sa.Text, nullable=True),
        sa.Column("pathology_ordered", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("pathology_results", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "billing",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("patient_id", sa.String(36), sa.ForeignKey("patients.id"), nullable=False),
        sa.Column("appointment_id", sa.String(36), sa.ForeignKey("appointments.id"), nullable=True),
        sa.Column("procedure_id", sa.String(36), sa.ForeignKey("procedures.id"), nullable=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("insurance_covered", sa.Numeric(10, 2), nullable=True, server_default="0"),
        sa.Column("patient_responsibility", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("billing_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("paid_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("payment_method", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "patient_evolutions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("patient_id", sa.String(36), sa.ForeignKey("patients.id"), nullable=False),
        sa.Column("appointment_id", sa.String(36), sa.ForeignKey("appointments.id"), nullable=True),
        sa.Column("doctor_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("evolution_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("chief_complaint", sa.Text, nullable=True),
        sa.Column("history_of_present_illness", sa.Text, nullable=True),
        sa.Column("physical_examination", sa.Text, nullable=True),
        sa.Column("assessment", sa.Text, nullable=True),
        sa.Column("plan", sa.Text, nullable=True),
        sa.Column("prescriptions", JSON_DOC, nullable=True),
        sa.Column("next_appointment", sa.Text, nullable=True),
        sa.Column("observations", sa.Text, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_patient_evolutions_patient_id", "patient_evolutions", ["patient_id"])


def downgrade() -> None:
    op.drop_index("ix_patient_evolutions_patient_id", table_name="patient_evolutions")
    op.drop_table("patient_evolutions")
    op.drop_table("billing")
    op.drop_table("procedures")
    op.drop_index("ix_appointments_patient_id", table_name="appointments")
    op.drop_index("ix_appointments_appointment_date", table_name="appointments")
    op.drop_table("appointments")
    op.drop_table("patients")
    op.drop_table("users")
