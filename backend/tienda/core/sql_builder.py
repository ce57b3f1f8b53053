"""SQL Statement Builder — parameterized statements for list/create/update/delete.

Invariants:
    - Placeholders are named p1..pN; pK binds the K-th value actually included
    - Values are never interpolated into SQL text, only column and table names
      from EntityTable descriptors
    - build_update renumbers placeholders by the fields present, never by a
      field's slot in the column list
    - A field is present when its value is not None

Design Decisions:
    - Pure functions returning Statement: the repository executes, this module never does IO
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from tienda.core.entities import EntityTable
from tienda.core.errors import (
    ErrorContext, MissingFieldsError, NoFieldsToUpdateError,
)


@dataclass(frozen=True)
class Statement:
    """SQL text plus its bind parameters."""
    sql: str
    params: dict[str, Any] = field(default_factory=dict)


def placeholder(index: int) -> str:
    return f"p{index}"


def _returning(entity: EntityTable) -> str:
    return f"RETURNING {', '.join(entity.all_columns)}"


def build_select_all(entity: EntityTable) -> Statement:
    """Every row, every column. No ordering, no pagination."""
    return Statement(
        f"SELECT {', '.join(entity.all_columns)} FROM {entity.table}",
    )


def build_insert(entity: EntityTable, fields: Mapping[str, Any]) -> Statement:
    """INSERT ... RETURNING with every column bound in declared order."""
    missing = [c for c in entity.columns if fields.get(c) is None]
    if missing:
        raise MissingFieldsError(
            missing, ErrorContext(entity=entity.label, operation="create"),
        )
    params = {
        placeholder(i): fields[column]
        for i, column in enumerate(entity.columns, start=1)
    }
    values = ", ".join(f":{name}" for name in params)
    return Statement(
        f"INSERT INTO {entity.table} ({', '.join(entity.columns)}) "
        f"VALUES ({values}) {_returning(entity)}",
        params,
    )


def build_delete(entity: EntityTable, entity_id: int) -> Statement:
    return Statement(
        f"DELETE FROM {entity.table} WHERE id = :{placeholder(1)}",
        {placeholder(1): entity_id},
    )


def build_update(
    entity: EntityTable, entity_id: int, fields: Mapping[str, Any],
) -> Statement:
    """UPDATE with a SET clause holding only the present fields.

    Columns are visited in the entity's declared order; each present one
    appends `column = :pK` where K is the running count of binds so far.
    The id takes the next index after the last SET value. Keys that are
    not mutable columns of the entity are ignored.

    Raises NoFieldsToUpdateError when nothing is present.
    """
    params: dict[str, Any] = {}
    set_clauses: list[str] = []
    for column in entity.columns:
        value = fields.get(column)
        if value is None:
            continue
        name = placeholder(len(params) + 1)
        params[name] = value
        set_clauses.append(f"{column} = :{name}")

    if not set_clauses:
        raise NoFieldsToUpdateError(
            ErrorContext(
                entity=entity.label, entity_id=entity_id, operation="update",
            ),
        )

    id_name = placeholder(len(params) + 1)
    params[id_name] = entity_id
    return Statement(
        f"UPDATE {entity.table} SET {', '.join(set_clauses)} "
        f"WHERE id = :{id_name} {_returning(entity)}",
        params,
    )
