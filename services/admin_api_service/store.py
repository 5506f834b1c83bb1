"""Narrow repository over the async SQLAlchemy session.

Handlers read and write exclusively through ``SqlAlchemyStore``. The store
does not know about shops: callers always put the shop id into ``filters``.

Filters are equality maps keyed by column name. A dotted key filters through
a relationship, e.g. ``{"product.shop_id": shop_id}`` on ``ProductVariant``
joins ``Product``.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar

from libs.common.logging import get_logger
from services.admin_api_service.errors import StoreFailureError
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")

# (column name, "asc" | "desc")
OrderSpec = Sequence[tuple[str, str]]


class SqlAlchemyStore:
    """find / find_one / save / count over one session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def _apply_filters(
        self, query: Select, kind: type, filters: Optional[Mapping[str, Any]]
    ) -> Select:
        joined: set[str] = set()
        for key, value in (filters or {}).items():
            if "." in key:
                relation_name, column_name = key.split(".", 1)
                relation = getattr(kind, relation_name)
                target = relation.property.mapper.class_
                if relation_name not in joined:
                    query = query.join(relation)
                    joined.add(relation_name)
                column = getattr(target, column_name)
            else:
                column = getattr(kind, key)

            if value is None:
                query = query.where(column.is_(None))
            else:
                query = query.where(column == value)
        return query

    @staticmethod
    def _apply_order(query: Select, kind: type, order: Optional[OrderSpec]) -> Select:
        for column_name, direction in order or ():
            column = getattr(kind, column_name)
            query = query.order_by(
                column.desc() if direction.lower() == "desc" else column.asc()
            )
        return query

    @staticmethod
    def _apply_load(query: Select, kind: type, load: Iterable[str]) -> Select:
        for relation_name in load:
            query = query.options(selectinload(getattr(kind, relation_name)))
        return query

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def find(
        self,
        kind: type[ModelT],
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[OrderSpec] = None,
        limit: Optional[int] = None,
        *,
        load: Iterable[str] = (),
    ) -> list[ModelT]:
        query = self._apply_filters(select(kind), kind, filters)
        query = self._apply_order(query, kind, order)
        query = self._apply_load(query, kind, load)
        if limit is not None:
            query = query.limit(limit)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as exc:
            raise self._failure("find", kind, exc) from exc
        return list(result.scalars().all())

    async def find_one(
        self,
        kind: type[ModelT],
        filters: Optional[Mapping[str, Any]] = None,
        *,
        load: Iterable[str] = (),
    ) -> Optional[ModelT]:
        rows = await self.find(kind, filters, limit=1, load=load)
        return rows[0] if rows else None

    async def count(
        self, kind: type, filters: Optional[Mapping[str, Any]] = None
    ) -> int:
        query = self._apply_filters(
            select(func.count()).select_from(kind), kind, filters
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as exc:
            raise self._failure("count", kind, exc) from exc
        return int(result.scalar_one())

    async def save(self, kind: type[ModelT], row: ModelT) -> ModelT:
        """Insert or update ``row`` and commit.

        Each call is its own transaction; a sequence of saves is not atomic.
        """
        if not isinstance(row, kind):
            raise TypeError(f"Expected {kind.__name__}, got {type(row).__name__}")

        self.db.add(row)
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._failure("save", kind, exc) from exc
        return row

    @staticmethod
    def _failure(operation: str, kind: type, exc: SQLAlchemyError) -> StoreFailureError:
        logger.error(
            "Store %s on %s failed: %s", operation, kind.__name__, exc, exc_info=exc
        )
        return StoreFailureError(f"Store operation failed ({operation} {kind.__name__})")
