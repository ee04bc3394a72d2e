"""Infrastructure Layer: database engine, logging and credential primitives.

Invariants:
    - Infrastructure never imports from repositories/, services/ or api/
"""
