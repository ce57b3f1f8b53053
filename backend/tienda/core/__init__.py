"""Core Layer — pure logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Statement building is deterministic for a given entity and payload
"""
