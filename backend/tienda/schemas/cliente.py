"""Cliente Schemas — create, partial update and response shapes.

Invariants:
    - ClienteCreate: nombre, telefono, presupuesto all required
    - ClienteUpdate: every field optional; None and absent both mean "unchanged"
    - telefono is free text (no format validation)
"""

from pydantic import BaseModel


class ClienteCreate(BaseModel):
    """Customer creation — every column required."""
    nombre: str
    telefono: str
    presupuesto: float


class ClienteUpdate(BaseModel):
    """Partial customer update — only present fields are written."""
    nombre: str | None = None
    telefono: str | None = None
    presupuesto: float | None = None

    def present_fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class ClienteResponse(BaseModel):
    id: int
    nombre: str
    telefono: str
    presupuesto: float
