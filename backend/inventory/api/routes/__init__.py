"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no SQL; they call a repository and translate None into 404
"""
