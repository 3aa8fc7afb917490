"""Pydantic Schemas: request/response contracts for the inventory API.

Invariants:
    - Payload models list every mutable field; required vs optional is explicit
    - Out models mirror table rows (created_at included)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
