"""ORM Models: SQLAlchemy declarative models for all clinic entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column attribute names equal column names (snake_case)
    - Ids are server-generated UUID4 strings

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() targets resolve
      before any query runs
"""

from gastromed.models.user import User  # noqa: F401
from gastromed.models.patient import Patient  # noqa: F401
from gastromed.models.appointment import Appointment  # noqa: F401
from gastromed.models.procedure import Procedure  # noqa: F401
from gastromed.models.billing import Billing  # noqa: F401
from gastromed.models.patient_evolution import PatientEvolution  # noqa: F401
