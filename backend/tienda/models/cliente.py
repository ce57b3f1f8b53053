"""Cliente ORM — table shape for customers."""

from sqlalchemy import String, Integer, Float
from sqlalchemy.orm import Mapped, mapped_column

from tienda.db.base import Base


class Cliente(Base):
    __tablename__ = "clientes"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-form; no format check
    telefono: Mapped[str] = mapped_column(String(255), nullable=False)
    presupuesto: Mapped[float] = mapped_column(Float, nullable=False)
