"""Patient Routes: registry CRUD, search and per-patient history.

Invariants:
    - Listing and search only return active patients
    - DELETE is a soft delete; deleting an already inactive patient is a 404
    - /search and the history sub-resources are declared before /{patient_id}
"""

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import (
    get_appointment_repository, get_patient_repository,
    get_procedure_repository, require,
)
from gastromed.core.errors import InvalidRequestError, ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import (
    AppointmentRepository, PatientRepository, ProcedureRepository,
)
from gastromed.schemas.appointment import AppointmentWithDoctor
from gastromed.schemas.base import MessageResponse
from gastromed.schemas.patient import PatientCreate, PatientResponse, PatientUpdate
from gastromed.schemas.procedure import ProcedureWithAppointment

router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.get(
    "", response_model=list[PatientResponse],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_patients(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    patients: PatientRepository = Depends(get_patient_repository),
):
    return await patients.list(limit=limit, offset=offset)


@router.get(
    "/search", response_model=list[PatientResponse],
    dependencies=[Depends(require(Capability.READ))],
)
async def search_patients(
    q: str | None = Query(None),
    patients: PatientRepository = Depends(get_patient_repository),
):
    if not q or not q.strip():
        raise InvalidRequestError("Search query is required")
    return await patients.search(q.strip())


@router.get(
    "/{patient_id}", response_model=PatientResponse,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_patient(
    patient_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
):
    patient = await patients.get_by_id(patient_id)
    if patient is None:
        raise ResourceNotFoundError("Patient", patient_id)
    return patient


@router.get(
    "/{patient_id}/appointments", response_model=list[AppointmentWithDoctor],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_patient_appointments(
    patient_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    if await patients.get_by_id(patient_id) is None:
        raise ResourceNotFoundError("Patient", patient_id)
    return await appointments.list_by_patient(patient_id)


@router.get(
    "/{patient_id}/procedures", response_model=list[ProcedureWithAppointment],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_patient_procedures(
    patient_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
    procedures: ProcedureRepository = Depends(get_procedure_repository),
):
    if await patients.get_by_id(patient_id) is None:
        raise ResourceNotFoundError("Patient", patient_id)
    return await procedures.list_by_patient(patient_id)


@router.post(
    "", response_model=PatientResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.MANAGE_PATIENTS))],
)
async def create_patient(
    body: PatientCreate,
    patients: PatientRepository = Depends(get_patient_repository),
):
    return await patients.create(body.model_dump())


@router.patch(
    "/{patient_id}", response_model=PatientResponse,
    dependencies=[Depends(require(Capability.MANAGE_PATIENTS))],
)
async def update_patient(
    patient_id: str,
    body: PatientUpdate,
    patients: PatientRepository = Depends(get_patient_repository),
):
    patient = await patients.update(patient_id, body.model_dump(exclude_unset=True))
    if patient is None:
        raise ResourceNotFoundError("Patient", patient_id)
    return patient


@router.delete(
    "/{patient_id}", response_model=MessageResponse,
    dependencies=[Depends(require(Capability.MANAGE_PATIENTS))],
)
async def delete_patient(
    patient_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
):
    if not await patients.delete(patient_id):
        raise ResourceNotFoundError("Patient", patient_id)
    return MessageResponse(message="Patient deleted successfully")
