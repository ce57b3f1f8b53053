"""Entity Descriptors — table name, label and ordered mutable columns per entity.

Invariants:
    - columns excludes id (server-generated, immutable)
    - columns order is the fixed field order used by every statement
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityTable:
    """Static description of one managed table."""
    table: str
    label: str
    columns: tuple[str, ...]

    @property
    def all_columns(self) -> tuple[str, ...]:
        return ("id",) + self.columns

    @property
    def title(self) -> str:
        """Capitalized label used in response messages."""
        return self.label.capitalize()


PRODUCTOS = EntityTable(
    table="productos",
    label="producto",
    columns=("nombre", "categoria", "precio", "cantidad"),
)

CLIENTES = EntityTable(
    table="clientes",
    label="cliente",
    columns=("nombre", "telefono", "presupuesto"),
)
