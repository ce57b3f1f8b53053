"""Producto Routes — list, create, partial update and delete.

Invariants:
    - List failures → 404 "No productos found"
    - Write failures → 500 "Failed to <op> producto" (unless classified_errors)
    - Empty update → 400 "No fields to update", database untouched
    - Delete reports success even when no row had the id
"""

import logging

from fastapi import APIRouter, Depends, status

from tienda.api.failures import collapse_failure
from tienda.config import Settings, get_settings
from tienda.core.entities import PRODUCTOS
from tienda.core.errors import TiendaError
from tienda.infrastructure.database import DatabaseSessionManager, get_db_manager
from tienda.schemas.producto import (
    ProductoCreate, ProductoResponse, ProductoUpdate,
)
from tienda.services.entity_repository import EntityRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/productos", tags=["productos"])


def get_repository(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> EntityRepository:
    return EntityRepository(manager, PRODUCTOS)


@router.get("", response_model=list[ProductoResponse])
async def fetch_productos(
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    try:
        return await repo.list_all()
    except TiendaError as e:
        raise collapse_failure(
            e, "No productos found", status.HTTP_404_NOT_FOUND,
            settings.classified_errors,
        )


@router.post("", response_model=ProductoResponse)
async def create_producto(
    body: ProductoCreate,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Create a producto; the response carries the generated id."""
    try:
        return await repo.create(body.model_dump())
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to create producto",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )


@router.put("/{producto_id}", response_model=ProductoResponse)
async def update_producto(
    producto_id: int,
    body: ProductoUpdate,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Apply the present fields of the body to one producto."""
    try:
        return await repo.update(producto_id, body.present_fields())
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to update producto",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )


@router.delete("/{producto_id}")
async def delete_producto(
    producto_id: int,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    try:
        await repo.delete(producto_id)
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to delete producto",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )
    return "Producto deleted"
