"""Billing Routes: invoices per patient. No delete."""

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import get_billing_repository, require
from gastromed.core.errors import ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import BillingRepository
from gastromed.schemas.billing import (
    BillingCreate, BillingResponse, BillingUpdate, BillingWithPatient,
)

router = APIRouter(prefix="/api/billing", tags=["billing"])


@router.get(
    "", response_model=list[BillingWithPatient],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_billing(
    patient_id: str | None = Query(None, alias="patientId"),
    billing: BillingRepository = Depends(get_billing_repository),
):
    return await billing.list(patient_id or None)


@router.get(
    "/{billing_id}", response_model=BillingWithPatient,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_billing(
    billing_id: str,
    billing: BillingRepository = Depends(get_billing_repository),
):
    record = await billing.get_by_id(billing_id)
    if record is None:
        raise ResourceNotFoundError("Billing record", billing_id)
    return record


@router.post(
    "", response_model=BillingResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.MANAGE_BILLING))],
)
async def create_billing(
    body: BillingCreate,
    billing: BillingRepository = Depends(get_billing_repository),
):
    return await billing.create(body.model_dump())


@router.patch(
    "/{billing_id}", response_model=BillingResponse,
    dependencies=[Depends(require(Capability.MANAGE_BILLING))],
)
async def update_billing(
    billing_id: str,
    body: BillingUpdate,
    billing: BillingRepository = Depends(get_billing_repository),
):
    record = await billing.update(billing_id, body.model_dump(exclude_unset=True))
    if record is None:
        raise ResourceNotFoundError("Billing record", billing_id)
    return record
