"""Producto ORM — table shape for products.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - precio and cantidad carry no sign constraint
"""

from sqlalchemy import String, Integer, Float
from sqlalchemy.orm import Mapped, mapped_column

from tienda.db.base import Base


class Producto(Base):
    __tablename__ = "productos"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    categoria: Mapped[str] = mapped_column(String(255), nullable=False)
    precio: Mapped[float] = mapped_column(Float, nullable=False)
    cantidad: Mapped[int] = mapped_column(Integer, nullable=False)
