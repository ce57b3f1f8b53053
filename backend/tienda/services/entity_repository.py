"""Entity Repository — executes built statements against the pooled session manager.

Invariants:
    - Each operation acquires exactly one pooled session and releases it on exit
    - Rows leave this module as plain dicts keyed by column name
    - update() rejects empty payloads before acquiring a session
    - delete() reports the affected row count; zero is not an error

Design Decisions:
    - Statements come from core/sql_builder.py; this module only executes and maps
"""

import logging
from typing import Any, Mapping

from sqlalchemy import text

from tienda.core.entities import EntityTable
from tienda.core.errors import ErrorContext, ResourceNotFoundError
from tienda.core.sql_builder import (
    build_delete, build_insert, build_select_all, build_update,
)
from tienda.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class EntityRepository:
    """CRUD over one entity table."""

    def __init__(self, manager: DatabaseSessionManager, entity: EntityTable):
        self.manager = manager
        self.entity = entity

    async def list_all(self) -> list[dict]:
        stmt = build_select_all(self.entity)
        async with self.manager.session() as db:
            result = await db.execute(text(stmt.sql), stmt.params)
            return [dict(row) for row in result.mappings().all()]

    async def create(self, fields: Mapping[str, Any]) -> dict:
        """Insert one row and return it with its generated id."""
        stmt = build_insert(self.entity, fields)
        async with self.manager.session() as db:
            result = await db.execute(text(stmt.sql), stmt.params)
            row = dict(result.mappings().one())
            await db.commit()
        logger.info(
            f"Created {self.entity.label} #{row['id']}",
            extra={"entity": self.entity.label, "entity_id": row["id"]},
        )
        return row

    async def update(self, entity_id: int, fields: Mapping[str, Any]) -> dict:
        """Write only the present fields and return the updated row.

        Raises NoFieldsToUpdateError (no session acquired) when nothing is
        present, ResourceNotFoundError when no row has this id.
        """
        stmt = build_update(self.entity, entity_id, fields)
        async with self.manager.session() as db:
            result = await db.execute(text(stmt.sql), stmt.params)
            row = result.mappings().one_or_none()
            row = dict(row) if row is not None else None
            await db.commit()
        if row is None:
            raise ResourceNotFoundError(
                self.entity.title, entity_id,
                ErrorContext(
                    entity=self.entity.label, entity_id=entity_id,
                    operation="update",
                ),
            )
        return row

    async def delete(self, entity_id: int) -> int:
        stmt = build_delete(self.entity, entity_id)
        async with self.manager.session() as db:
            result = await db.execute(text(stmt.sql), stmt.params)
            await db.commit()
        if result.rowcount == 0:
            logger.warning(
                f"Delete matched no {self.entity.label} with id {entity_id}",
                extra={"entity": self.entity.label, "entity_id": entity_id},
            )
        return result.rowcount
