"""Schema Base: camelCase wire models, boundary types and partial-model derivation.

Invariants:
    - Wire format is camelCase; snake_case field names are accepted on input too
    - Input timestamps leave validation timezone-aware UTC (naive = clinic-local)
    - Output timestamps are always serialized as UTC, even when the driver returns naive values
    - partial_model(M) keeps every constraint and enum domain of M; only presence becomes optional

Design Decisions:
    - One create model per entity is the single source of truth; the PATCH shape is
      derived from it with partial_model instead of being written by hand
    - Enum values are stored as plain strings (use_enum_values) so dumps go straight to the ORM
"""

from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, create_model,
)
from pydantic.alias_generators import to_camel

from gastromed.config import get_settings
from gastromed.core.clinic_time import ensure_utc, normalize_timestamp


class CamelModel(BaseModel):
    """Base for every request/response body."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True,
    )


class ResponseModel(CamelModel):
    """Base for bodies built from ORM rows."""
    model_config = ConfigDict(from_attributes=True)


# ─── Boundary types ──────────────────────────────────────────────

def _coerce_timestamp(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if len(value) == 10:
            # date-only string: local midnight of that day
            return datetime.combine(date.fromisoformat(value), time.min)
        return value
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


def _to_clinic_utc(value: datetime) -> datetime:
    return normalize_timestamp(value, get_settings().clinic_zone)


def _coerce_iso_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def _check_iso_date(value: str) -> str:
    value = value.strip()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        raise ValueError("must be an ISO-8601 date (YYYY-MM-DD)") from None


def _quantize_money(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


Timestamp = Annotated[
    datetime, BeforeValidator(_coerce_timestamp), AfterValidator(_to_clinic_utc),
]
OptionalTimestamp = Annotated[Timestamp | None, BeforeValidator(_coerce_timestamp)]

IsoDate = Annotated[
    str, BeforeValidator(_coerce_iso_date), AfterValidator(_check_iso_date),
]

MoneyAmount = Annotated[Decimal, AfterValidator(_quantize_money)]

OptionalRef = Annotated[str | None, BeforeValidator(_blank_to_none)]

UtcTimestamp = Annotated[datetime, AfterValidator(ensure_utc)]


# ─── Derived shapes ──────────────────────────────────────────────

ModelT = TypeVar("ModelT", bound=BaseModel)


def partial_model(model: type[ModelT], name: str | None = None) -> type[ModelT]:
    """Derive the PATCH shape of `model`: every field optional, nothing else relaxed.

    Omitted fields stay unset (dump with exclude_unset=True). An explicit null on a
    field whose type does not admit None still fails, because defaults are not
    validated but supplied values are.
    """
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (annotation, Field(default=None))
    return create_model(
        name or f"{model.__name__}Partial",
        __base__=model,
        __module__=model.__module__,
        **fields,
    )


class MessageResponse(CamelModel):
    message: str
