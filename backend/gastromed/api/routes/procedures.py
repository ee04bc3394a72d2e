"""Procedure Routes: endoscopy/procedure records. No delete."""

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import get_procedure_repository, require
from gastromed.core.errors import ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import ProcedureRepository
from gastromed.schemas.procedure import (
    ProcedureCreate, ProcedureDetail, ProcedureResponse, ProcedureUpdate,
    ProcedureWithPatient,
)

router = APIRouter(prefix="/api/procedures", tags=["procedures"])


@router.get(
    "", response_model=list[ProcedureWithPatient],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_procedures(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    procedures: ProcedureRepository = Depends(get_procedure_repository),
):
    return await procedures.list(limit=limit, offset=offset)


@router.get(
    "/{procedure_id}", response_model=ProcedureDetail,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_procedure(
    procedure_id: str,
    procedures: ProcedureRepository = Depends(get_procedure_repository),
):
    procedure = await procedures.get_by_id(procedure_id)
    if procedure is None:
        raise ResourceNotFoundError("Procedure", procedure_id)
    return procedure


@router.post(
    "", response_model=ProcedureResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.WRITE_PROCEDURES))],
)
async def create_procedure(
    body: ProcedureCreate,
    procedures: ProcedureRepository = Depends(get_procedure_repository),
):
    return await procedures.create(body.model_dump())


@router.patch(
    "/{procedure_id}", response_model=ProcedureResponse,
    dependencies=[Depends(require(Capability.WRITE_PROCEDURES))],
)
async def update_procedure(
    procedure_id: str,
    body: ProcedureUpdate,
    procedures: ProcedureRepository = Depends(get_procedure_repository),
):
    procedure = await procedures.update(
        procedure_id, body.model_dump(exclude_unset=True),
    )
    if procedure is None:
        raise ResourceNotFoundError("Procedure", procedure_id)
    return procedure
