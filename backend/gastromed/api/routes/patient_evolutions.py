"""Patient Evolution Routes: clinical progress notes.

Paths keep the historical split between the plural collection
(/api/patient-evolutions/...) and the singular detail lookup
(/api/patient-evolution/{id}).
"""

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import get_evolution_repository, require
from gastromed.core.errors import ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import EvolutionRepository
from gastromed.schemas.base import MessageResponse
from gastromed.schemas.patient_evolution import (
    EvolutionCreate, EvolutionDetail, EvolutionResponse, EvolutionUpdate,
)

router = APIRouter(prefix="/api", tags=["patient-evolutions"])


@router.get(
    "/patient-evolutions/{patient_id}", response_model=list[EvolutionDetail],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_patient_evolutions(
    patient_id: str,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    evolutions: EvolutionRepository = Depends(get_evolution_repository),
):
    return await evolutions.list_by_patient(patient_id, limit=limit, offset=offset)


@router.get(
    "/patient-evolution/{evolution_id}", response_model=EvolutionDetail,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_evolution(
    evolution_id: str,
    evolutions: EvolutionRepository = Depends(get_evolution_repository),
):
    evolution = await evolutions.get_by_id(evolution_id)
    if evolution is None:
        raise ResourceNotFoundError("Patient evolution", evolution_id)
    return evolution


@router.post(
    "/patient-evolutions", response_model=EvolutionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.WRITE_EVOLUTIONS))],
)
async def create_evolution(
    body: EvolutionCreate,
    evolutions: EvolutionRepository = Depends(get_evolution_repository),
):
    return await evolutions.create(body.model_dump())


@router.patch(
    "/patient-evolutions/{evolution_id}", response_model=EvolutionResponse,
    dependencies=[Depends(require(Capability.WRITE_EVOLUTIONS))],
)
async def update_evolution(
    evolution_id: str,
    body: EvolutionUpdate,
    evolutions: EvolutionRepository = Depends(get_evolution_repository),
):
    evolution = await evolutions.update(
        evolution_id, body.model_dump(exclude_unset=True),
    )
    if evolution is None:
        raise ResourceNotFoundError("Patient evolution", evolution_id)
    return evolution


@router.delete(
    "/patient-evolutions/{evolution_id}", response_model=MessageResponse,
    dependencies=[Depends(require(Capability.WRITE_EVOLUTIONS))],
)
async def delete_evolution(
    evolution_id: str,
    evolutions: EvolutionRepository = Depends(get_evolution_repository),
):
    if not await evolutions.delete(evolution_id):
        raise ResourceNotFoundError("Patient evolution", evolution_id)
    return MessageResponse(message="Patient evolution deleted successfully")
