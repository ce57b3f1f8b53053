"""Services Layer — repositories that run SQL through pooled sessions.

Invariants:
    - Services raise TiendaError subclasses only; routes decide response status
"""
