"""Cliente Routes — list, create, partial update and delete.

Invariants:
    - List failures → 404 "No clientes found"
    - Write failures → 500 "Failed to <op> cliente" (unless classified_errors)
    - Empty update → 400 "No fields to update", database untouched
"""

import logging

from fastapi import APIRouter, Depends, status

from tienda.api.failures import collapse_failure
from tienda.config import Settings, get_settings
from tienda.core.entities import CLIENTES
from tienda.core.errors import TiendaError
from tienda.infrastructure.database import DatabaseSessionManager, get_db_manager
from tienda.schemas.cliente import (
    ClienteCreate, ClienteResponse, ClienteUpdate,
)
from tienda.services.entity_repository import EntityRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/clientes", tags=["clientes"])


def get_repository(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> EntityRepository:
    return EntityRepository(manager, CLIENTES)


@router.get("", response_model=list[ClienteResponse])
async def fetch_clientes(
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    try:
        return await repo.list_all()
    except TiendaError as e:
        raise collapse_failure(
            e, "No clientes found", status.HTTP_404_NOT_FOUND,
            settings.classified_errors,
        )


@router.post("", response_model=ClienteResponse)
async def create_cliente(
    body: ClienteCreate,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    try:
        return await repo.create(body.model_dump())
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to create cliente",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )


@router.put("/{cliente_id}", response_model=ClienteResponse)
async def update_cliente(
    cliente_id: int,
    body: ClienteUpdate,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Apply the present fields of the body to one cliente."""
    try:
        return await repo.update(cliente_id, body.present_fields())
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to update cliente",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )


@router.delete("/{cliente_id}")
async def delete_cliente(
    cliente_id: int,
    repo: EntityRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    try:
        await repo.delete(cliente_id)
    except TiendaError as e:
        raise collapse_failure(
            e, "Failed to delete cliente",
            status.HTTP_500_INTERNAL_SERVER_ERROR, settings.classified_errors,
        )
    return "Cliente deleted"
