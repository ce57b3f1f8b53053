"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Database exceptions leave this layer as DatabaseError only
"""
