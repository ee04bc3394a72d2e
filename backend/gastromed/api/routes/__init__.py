"""Route Modules: one file per resource family.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Absent repository results become ResourceNotFoundError (404)
"""
