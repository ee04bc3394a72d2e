"""Repositories: SQLAlchemy implementations of the protocols in core/repository_protocols.py.

Invariants:
    - One repository per entity, constructed per request with an AsyncSession
    - "Not found" is a None/False result, never an exception
    - Every mutation is a single statement committed immediately
"""
