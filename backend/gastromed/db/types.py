"""Portable column types.

Invariants:
    - JSON documents are JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
    - Money is NUMERIC(10, 2) and round-trips as Decimal
"""

from sqlalchemy import JSON, Numeric
from sqlalchemy.dialects.postgresql import JSONB

JSONDocument = JSON().with_variant(JSONB(), "postgresql")

Money = Numeric(10, 2, asdecimal=True)
