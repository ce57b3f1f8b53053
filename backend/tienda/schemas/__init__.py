"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Create schemas require every field; update schemas make every field optional
    - Schemas validate at the system boundary, before any route logic runs
"""
