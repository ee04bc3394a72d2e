"""Dashboard Schemas."""

from gastromed.schemas.base import CamelModel


class DashboardStats(CamelModel):
    today_appointments: int
    pending_procedures: int
    active_patients: int
    monthly_revenue: float
