"""Asset Inventory Package: users, computers and maintenance history over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
