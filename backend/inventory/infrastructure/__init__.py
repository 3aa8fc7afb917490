"""Infrastructure Layer: connection pool, schema bootstrap, logging setup.

Invariants:
    - Driver exceptions never escape: they leave as core.errors.DatabaseError
"""
