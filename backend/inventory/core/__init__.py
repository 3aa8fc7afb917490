"""Core Layer: error hierarchy, domain types and repository contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO: everything here is pure and synchronous
"""
