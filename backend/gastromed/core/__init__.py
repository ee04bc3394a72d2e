"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from repositories/, services/, api/, infrastructure/ or db/
    - All functions are pure and deterministic given their arguments
"""
