"""ORM Models — table declarations for productos and clientes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column order after id matches the EntityTable descriptors in core/entities.py
    - These classes are the schema declaration (Base.metadata); queries run as text SQL
"""

from tienda.models.producto import Producto  # noqa: F401
from tienda.models.cliente import Cliente  # noqa: F401
