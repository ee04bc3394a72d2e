"""Permissions: pure role -> capability map for staff principals.

Invariants:
    - Doctors hold every capability
    - Receptionists read everything and run front-desk records (patients,
      appointments, billing) but never write clinical records or manage users
    - has_capability never raises; enforcement lives in api/dependencies.py
"""

from enum import Enum

from gastromed.core.domain_types import UserRole


class Capability(str, Enum):
    READ = "read"
    MANAGE_PATIENTS = "manage_patients"
    MANAGE_APPOINTMENTS = "manage_appointments"
    MANAGE_BILLING = "manage_billing"
    WRITE_PROCEDURES = "write_procedures"
    WRITE_EVOLUTIONS = "write_evolutions"
    MANAGE_USERS = "manage_users"


ROLE_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.DOCTOR: frozenset(Capability),
    UserRole.RECEPTIONIST: frozenset({
        Capability.READ,
        Capability.MANAGE_PATIENTS,
        Capability.MANAGE_APPOINTMENTS,
        Capability.MANAGE_BILLING,
    }),
}


def has_capability(role: str | UserRole, capability: Capability) -> bool:
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return capability in ROLE_CAPABILITIES.get(role, frozenset())
