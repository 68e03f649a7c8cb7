"""SQLAlchemy implementation of BaseDao.

SqlBaseDao binds one AsyncSession, one ORM mapped class, and one Entity
subclass. Convention statements are built from the mapped class:

  - entity field ``id`` maps to the ORM primary-key attribute; every other
    entity field maps to the ORM attribute of the same name, and fields with
    no mapped attribute are ignored;
  - a template filters with ``column == value`` for each *set* field whose
    value is not None;
  - a page descriptor becomes ORDER BY / OFFSET / LIMIT and triggers one
    ``SELECT count(*)`` over the same criteria.

Named statements come from a StatementRegistry and are paged and counted by
wrapping them as a subquery.

Batch guarantees: delete_by_id_in_batch is a single DELETE ... IN statement;
insert_in_batch flushes all rows at once; update_in_batch issues one UPDATE
per entity. Anything stronger comes from the caller's transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import Select, column, delete, func, inspect, literal_column, select, update
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.expression import ColumnElement, TextClause, TextualSelect

from dao_core.domain.exceptions import InvalidArgumentError, TooManyResultsError
from dao_core.domain.models.entity import ID_FIELD, Entity
from dao_core.domain.models.enums import DbExecuteType
from dao_core.domain.models.paging import Page, PagedList, PageRequest
from dao_core.domain.models.query import Query
from dao_core.domain.repositories.base import ID, BaseDao, StatementParams, T, V
from dao_core.domain.services.id_generation import IdGenerator, is_blank_key, uuid_hex
from dao_core.infrastructure.persistence.statements import StatementRegistry

logger = logging.getLogger(__name__)


class SqlBaseDao(BaseDao[T, ID]):
    def __init__(
        self,
        session: AsyncSession,
        orm_model: type[DeclarativeBase],
        entity_type: type[T],
        statements: StatementRegistry | None = None,
        id_generator: IdGenerator = uuid_hex,
    ) -> None:
        self._session = session
        self._orm_model = orm_model
        self._entity_type = entity_type
        self._statements = statements if statements is not None else StatementRegistry()
        self._id_generator = id_generator

        mapper = inspect(orm_model)
        if len(mapper.primary_key) != 1:
            raise ValueError(f"{orm_model.__name__} must have a single-column primary key")
        self._pk_attr: str = mapper.get_property_by_column(mapper.primary_key[0]).key
        self._column_attrs = frozenset(prop.key for prop in mapper.column_attrs)

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    @property
    def statements(self) -> StatementRegistry:
        return self._statements

    # --- mapping helpers ---

    def _attr_name(self, field: str) -> str:
        return self._pk_attr if field == ID_FIELD else field

    def _is_mapped(self, field: str) -> bool:
        return self._attr_name(field) in self._column_attrs

    def _column(self, field: str) -> Any:
        if not self._is_mapped(field):
            raise InvalidArgumentError(
                f"{self._orm_model.__name__} has no mapped column for {field!r}"
            )
        return getattr(self._orm_model, self._attr_name(field))

    @property
    def _pk_column(self) -> Any:
        return getattr(self._orm_model, self._pk_attr)

    def _criteria(self, template: Entity | None) -> list[ColumnElement[bool]]:
        if template is None:
            return []
        return [
            self._column(field) == value
            for field, value in template.explicit_values().items()
            if value is not None and self._is_mapped(field)
        ]

    def _to_domain(self, row: Any, result_type: type[Entity] | None = None) -> Any:
        model = result_type or self._entity_type
        data = {}
        for field in model.model_fields:
            attr = self._attr_name(field)
            if hasattr(row, attr):
                data[field] = getattr(row, attr)
        return model.model_validate(data)

    def _row_to(self, row: Any, result_type: type[Entity] | None = None) -> Any:
        # A statement selecting one ORM entity yields single-element rows.
        if len(row) == 1 and isinstance(row[0], self._orm_model):
            return self._to_domain(row[0], result_type)
        data = dict(row._mapping)
        if self._pk_attr != ID_FIELD and self._pk_attr in data and ID_FIELD not in data:
            data[ID_FIELD] = data.pop(self._pk_attr)
        return (result_type or self._entity_type).model_validate(data)

    def _write_values(self, entity: Entity, fields: Sequence[str]) -> dict[str, Any]:
        return {
            self._attr_name(field): getattr(entity, field)
            for field in fields
            if field != ID_FIELD and self._is_mapped(field)
        }

    def _insert_values(self, entity: Entity) -> dict[str, Any]:
        # None values are left out so column defaults and autoincrement apply.
        values = {}
        for field in type(entity).model_fields:
            value = getattr(entity, field)
            if value is not None and self._is_mapped(field):
                values[self._attr_name(field)] = value
        return values

    @staticmethod
    def _bind_params(params: StatementParams) -> dict[str, Any]:
        if params is None:
            return {}
        if isinstance(params, Entity):
            return params.explicit_values()
        return dict(params)

    @staticmethod
    def _require_template(template: Entity | None) -> None:
        if template is None:
            raise InvalidArgumentError("template must not be None")

    @staticmethod
    def _require_id(entity: Entity | None) -> None:
        if entity is None:
            raise InvalidArgumentError("entity must not be None")
        if entity.get_id() is None:
            raise InvalidArgumentError(f"{type(entity).__name__}.id must not be None")

    def _paginate(
        self, stmt: Select, page_request: PageRequest, column_for: Callable[[str], Any]
    ) -> Select:
        for order in page_request.sort or ():
            column = column_for(order.property)
            stmt = stmt.order_by(column.desc() if order.direction.is_descending else column.asc())
        return stmt.offset(page_request.offset).limit(page_request.page_size)

    def _select(self, template: T | None, page_request: PageRequest | None) -> Select:
        stmt = select(self._orm_model).where(*self._criteria(template))
        if page_request is not None:
            stmt = self._paginate(stmt, page_request, self._column)
        return stmt

    async def _fetch(self, stmt: Select) -> list[T]:
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def _count(self, template: T | None) -> int:
        stmt = (
            select(func.count())
            .select_from(self._orm_model)
            .where(*self._criteria(template))
        )
        result = await self._session.execute(stmt)
        total = result.scalar_one()
        logger.debug("Counted %s %s rows", total, self._orm_model.__name__)
        return total

    def _assign_id(self, entity: T) -> Any:
        key = entity.get_id()
        if is_blank_key(key):
            key = self._id_generator()
            entity.set_id(key)
            if key is not None:
                logger.debug("Generated id %s for %s", key, type(entity).__name__)
        return key

    # --- query by example ---

    async def select_one(self, template: T) -> T | None:
        self._require_template(template)
        result = await self._session.execute(self._select(template, None))
        try:
            row = result.scalar_one_or_none()
        except MultipleResultsFound as exc:
            raise TooManyResultsError(expected=1) from exc
        return self._to_domain(row) if row is not None else None

    async def select_by_id(self, id: ID) -> T | None:
        if id is None:
            raise InvalidArgumentError("id must not be None")
        stmt = select(self._orm_model).where(self._pk_column == id)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    async def select_list(
        self, template: T | None = None, page_request: PageRequest | None = None
    ) -> list[T]:
        content = await self._fetch(self._select(template, page_request))
        if page_request is None:
            return content
        total = await self._count(template)
        return PagedList(content, page_request=page_request, total_elements=total)

    async def select_all(self) -> list[T]:
        return await self._fetch(select(self._orm_model))

    async def select_map(
        self,
        template: T | None,
        key_field: str,
        page_request: PageRequest | None = None,
    ) -> dict[Any, T]:
        if not key_field or key_field not in self._entity_type.model_fields:
            raise InvalidArgumentError(
                f"{self._entity_type.__name__} has no field {key_field!r}"
            )
        content = await self._fetch(self._select(template, page_request))
        return {getattr(entity, key_field): entity for entity in content}

    async def select_page_list(
        self, template: T | None = None, page_request: PageRequest | None = None
    ) -> Page[T]:
        content = await self._fetch(self._select(template, page_request))
        total = await self._count(template)
        if page_request is None:
            page_request = PageRequest.of(0, max(len(content), 1))
        return Page.of(content, page_request, total)

    async def select_count(self, template: T | None = None) -> int:
        return await self._count(template)

    # --- writes ---

    async def insert(self, entity: T) -> ID:
        if entity is None:
            raise InvalidArgumentError("entity must not be None")
        key = self._assign_id(entity)
        row = self._orm_model(**self._insert_values(entity))
        self._session.add(row)
        await self._session.flush()
        if key is None:
            key = getattr(row, self._pk_attr)
            entity.set_id(key)
        return key

    async def delete(self, template: T) -> int:
        self._require_template(template)
        stmt = delete(self._orm_model).where(*self._criteria(template))
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, id: ID) -> int:
        if id is None:
            raise InvalidArgumentError("id must not be None")
        stmt = delete(self._orm_model).where(self._pk_column == id)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(self._orm_model))
        return result.rowcount

    async def _update(self, id: Any, values: Mapping[str, Any]) -> int:
        if not values:
            return 0
        stmt = update(self._orm_model).where(self._pk_column == id).values(**values)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def update_by_id(self, entity: T) -> int:
        self._require_id(entity)
        values = self._write_values(entity, list(type(entity).model_fields))
        return await self._update(entity.get_id(), values)

    async def update_by_id_selective(self, entity: T) -> int:
        self._require_id(entity)
        values = self._write_values(entity, list(entity.model_fields_set))
        if not values:
            logger.debug("Nothing set on %s %s; update skipped", type(entity).__name__, entity.get_id())
            return 0
        return await self._update(entity.get_id(), values)

    # --- batch ---

    async def delete_by_id_in_batch(self, ids: Sequence[ID] | None) -> None:
        if not ids:
            logger.debug("delete_by_id_in_batch called with no ids")
            return
        if any(id is None for id in ids):
            raise InvalidArgumentError("ids must not contain None")
        stmt = delete(self._orm_model).where(self._pk_column.in_(list(ids)))
        await self._session.execute(stmt)

    async def insert_in_batch(self, entities: Sequence[T] | None) -> None:
        if not entities:
            logger.debug("insert_in_batch called with no entities")
            return
        if any(entity is None for entity in entities):
            raise InvalidArgumentError("entities must not contain None")
        rows = []
        for entity in entities:
            self._assign_id(entity)
            rows.append(self._orm_model(**self._insert_values(entity)))
        self._session.add_all(rows)
        await self._session.flush()
        for entity, row in zip(entities, rows):
            if entity.get_id() is None:
                entity.set_id(getattr(row, self._pk_attr))

    async def update_in_batch(self, entities: Sequence[T] | None) -> None:
        if not entities:
            logger.debug("update_in_batch called with no entities")
            return
        for entity in entities:
            self._require_id(entity)
        for entity in entities:
            await self.update_by_id_selective(entity)

    # --- named statements ---

    async def execute_sql(
        self,
        execute_type: DbExecuteType,
        statement_id: str,
        params: StatementParams = None,
        result_type: type[V] | None = None,
    ) -> list[Any]:
        execute_type = DbExecuteType(execute_type)
        statement = self._statements.get(statement_id)
        logger.debug("Executing %s statement %s", execute_type.value, statement_id)
        result = await self._session.execute(statement, self._bind_params(params))
        if execute_type.returns_rows:
            return [self._row_to(row, result_type) for row in result]
        return []

    async def run_sql(
        self,
        execute_type: DbExecuteType,
        statement_id: str,
        params: StatementParams = None,
    ) -> list[Any]:
        execute_type = DbExecuteType(execute_type)
        statement = self._statements.get(statement_id)
        logger.debug("Running %s statement %s", execute_type.value, statement_id)
        result = await self._session.execute(statement, self._bind_params(params))
        if execute_type.returns_rows:
            return [dict(row._mapping) for row in result]
        return [result.rowcount]

    async def select_one_by_statement(
        self, statement_id: str, template: T, result_type: type[V] | None = None
    ) -> Any:
        self._require_template(template)
        rows = await self.execute_sql(DbExecuteType.SELECT, statement_id, template, result_type)
        if len(rows) > 1:
            raise TooManyResultsError(expected=1, actual=len(rows))
        return rows[0] if rows else None

    async def select_all_by_statement(
        self,
        statement_id: str,
        template: T | None = None,
        result_type: type[V] | None = None,
    ) -> list[Any]:
        return await self.execute_sql(DbExecuteType.SELECT, statement_id, template, result_type)

    async def select_page_by_statement(
        self,
        statement_id: str,
        template: T | None,
        page_request: PageRequest | None,
        result_type: type[V] | None = None,
    ) -> Page[Any]:
        return await self._select_statement_page(
            statement_id, self._bind_params(template), page_request, result_type
        )

    async def select_page_by_query(
        self, query: Query, result_type: type[V] | None = None
    ) -> Page[Any]:
        if query is None:
            raise InvalidArgumentError("query must not be None")
        if not query.statement_id:
            raise InvalidArgumentError("query.statement_id must be set")
        return await self._select_statement_page(
            query.statement_id, dict(query.params), query.page_request, result_type
        )

    async def _select_statement_page(
        self,
        statement_id: str,
        params: dict[str, Any],
        page_request: PageRequest | None,
        result_type: type[Entity] | None,
    ) -> Page[Any]:
        statement = self._statements.get(statement_id)
        if isinstance(statement, TextClause):
            # Raw SQL declares no columns; it is paged as an opaque derived table.
            subquery = statement.columns().subquery()
            stmt = select(literal_column("*")).select_from(subquery)

            def column_for(field: str) -> Any:
                return column(field)

        elif isinstance(statement, (Select, TextualSelect)):
            subquery = statement.subquery()
            stmt = select(subquery)

            def column_for(field: str) -> Any:
                for name in (field, self._attr_name(field)):
                    if name in subquery.c:
                        return subquery.c[name]
                raise InvalidArgumentError(f"Statement {statement_id!r} has no column {field!r}")

        else:
            raise InvalidArgumentError(
                f"Statement {statement_id!r} cannot be paged; register a select() or SQL text"
            )

        if page_request is not None:
            stmt = self._paginate(stmt, page_request, column_for)
        result = await self._session.execute(stmt, params)
        content = [self._row_to(row, result_type) for row in result]

        count_result = await self._session.execute(
            select(func.count()).select_from(subquery), params
        )
        total = count_result.scalar_one()
        logger.debug("Counted %s rows for statement %s", total, statement_id)

        if page_request is None:
            page_request = PageRequest.of(0, max(len(content), 1))
        return Page.of(content, page_request, total)
