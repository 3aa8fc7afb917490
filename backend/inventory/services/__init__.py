"""Services Layer: one repository per table plus the stats reporter.

Invariants:
    - Each repository is built with an explicit DatabaseSessionManager
    - Each operation holds one pooled connection for one statement
"""
