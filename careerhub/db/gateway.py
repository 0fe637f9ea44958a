from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence, TypeVar

from sqlalchemy import Table, delete, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

import careerhub.models  # noqa: F401  # ensure all tables are registered on Base.metadata
from careerhub.database import Base, SessionLocal, new_uuid


logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataAccessError(RuntimeError):
    pass


@dataclass(frozen=True)
class Condition:
    column: str
    op: str
    value: Any = None
    children: tuple["Condition", ...] = ()


def eq(column: str, value: Any) -> Condition:
    return Condition(column=column, op="eq", value=value)


def gte(column: str, value: Any) -> Condition:
    return Condition(column=column, op="gte", value=value)


def in_(column: str, values: Iterable[Any]) -> Condition:
    return Condition(column=column, op="in", value=tuple(values))


def any_of(*conditions: Condition) -> Condition:
    """OR-group of conditions, e.g. ``any_of(eq("mentor_id", u), eq("mentee_id", u))``."""

    return Condition(column="", op="or", children=tuple(conditions))


def _table(name: str) -> Table:
    try:
        return Base.metadata.tables[name]
    except KeyError as exc:
        raise DataAccessError(f"Unknown table '{name}'") from exc


def _column(table: Table, name: str):
    try:
        return table.c[name]
    except KeyError as exc:
        raise DataAccessError(f"Unknown column '{table.name}.{name}'") from exc


def _compile_condition(table: Table, cond: Condition):
    if cond.op == "or":
        return or_(*(_compile_condition(table, child) for child in cond.children))

    column = _column(table, cond.column)
    if cond.op == "eq":
        return column.is_(None) if cond.value is None else column == cond.value
    if cond.op == "gte":
        return column >= cond.value
    if cond.op == "in":
        return column.in_(list(cond.value))
    raise DataAccessError(f"Unsupported filter operator '{cond.op}'")


def _compile_where(table: Table, where: Sequence[Condition]) -> list:
    return [_compile_condition(table, cond) for cond in where]


def _compile_order(table: Table, order_by: Sequence[str]) -> list:
    clauses = []
    for item in order_by:
        # "-created_at" sorts descending.
        if item.startswith("-"):
            clauses.append(_column(table, item[1:]).desc())
        else:
            clauses.append(_column(table, item).asc())
    return clauses


class TableGateway:
    """Table-scoped CRUD with filtering, ordering and limits.

    Every call opens its own session and runs in a worker thread, so
    independent calls can be awaited concurrently (``asyncio.gather``).
    Rows are returned as plain dicts keyed by column name.
    """

    def __init__(self, session_factory: sessionmaker | Callable[[], Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    async def select(
        self,
        table: str,
        *,
        where: Sequence[Condition] = (),
        order_by: Sequence[str] = (),
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        tbl = _table(table)
        stmt = select(tbl).where(*_compile_where(tbl, where)).order_by(*_compile_order(tbl, order_by))
        if limit is not None:
            stmt = stmt.limit(limit)

        def run(session: Session) -> list[dict[str, Any]]:
            return [dict(row) for row in session.execute(stmt).mappings().all()]

        return await self._run(f"select {table}", run)

    async def select_one(self, table: str, *, where: Sequence[Condition] = ()) -> dict[str, Any] | None:
        rows = await self.select(table, where=where, limit=1)
        return rows[0] if rows else None

    async def insert(self, table: str, rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        tbl = _table(table)
        payloads = [dict(row) for row in rows]
        if "id" in tbl.c:
            for payload in payloads:
                payload.setdefault("id", new_uuid())

        def run(session: Session) -> list[dict[str, Any]]:
            for payload in payloads:
                session.execute(insert(tbl).values(**payload))
            return payloads

        if not payloads:
            return []
        return await self._run(f"insert {table}", run)

    async def update(self, table: str, values: Mapping[str, Any], *, where: Sequence[Condition]) -> int:
        tbl = _table(table)
        stmt = update(tbl).where(*_compile_where(tbl, where)).values(**dict(values))

        def run(session: Session) -> int:
            return int(session.execute(stmt).rowcount or 0)

        return await self._run(f"update {table}", run)

    async def delete(self, table: str, *, where: Sequence[Condition]) -> int:
        tbl = _table(table)
        stmt = delete(tbl).where(*_compile_where(tbl, where))

        def run(session: Session) -> int:
            return int(session.execute(stmt).rowcount or 0)

        return await self._run(f"delete {table}", run)

    async def _run(self, label: str, fn: Callable[[Session], T]) -> T:
        return await asyncio.to_thread(self._run_sync, label, fn)

    def _run_sync(self, label: str, fn: Callable[[Session], T]) -> T:
        try:
            with self._session_factory() as session:
                result = fn(session)
                session.commit()
                return result
        except SQLAlchemyError as exc:
            logger.debug("gateway.%s failed: %s", label.replace(" ", "."), exc)
            raise DataAccessError(f"Data access failed ({label}): {type(exc).__name__}: {exc}") from exc
