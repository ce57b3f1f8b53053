"""Producto Schemas — create, partial update and response shapes.

Invariants:
    - ProductoCreate: nombre, categoria, precio, cantidad all required
    - ProductoUpdate: every field optional; None and absent both mean "unchanged"
"""

from pydantic import BaseModel


class ProductoCreate(BaseModel):
    """Product creation — every column required."""
    nombre: str
    categoria: str
    precio: float
    cantidad: int


class ProductoUpdate(BaseModel):
    """Partial product update — only present fields are written."""
    nombre: str | None = None
    categoria: str | None = None
    precio: float | None = None
    cantidad: int | None = None

    def present_fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class ProductoResponse(BaseModel):
    id: int
    nombre: str
    categoria: str
    precio: float
    cantidad: int
