"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary and never touch the database
    - Enum fields use the domain types from core/domain_types.py
    - Response models never expose password hashes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
