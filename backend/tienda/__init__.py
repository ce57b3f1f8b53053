"""Tienda API package — productos and clientes over a pooled database.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
