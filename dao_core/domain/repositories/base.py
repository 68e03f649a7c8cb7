"""Generic data-access contract.

BaseDao[T, ID] is the root abstraction for every data-access object. The
concrete SQLAlchemy implementation lives in
dao_core/infrastructure/persistence/ and is wired at the application boundary.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is an Entity subclass (never an ORM row); ID is its primary-key type.
  - Two query styles: query-by-example (a template whose *set* fields are
    equality filters) and named statements registered with the backend.
  - A page descriptor is the only thing that triggers a count query.
    select_page_list() and the *_page_* variants always count.
  - Methods taking result_type return rows validated into that narrower
    model instead of T.
  - Backend errors propagate unmodified; no retries at this layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from dao_core.domain.models.entity import Entity
from dao_core.domain.models.enums import DbExecuteType
from dao_core.domain.models.paging import Page, PageRequest
from dao_core.domain.models.query import Query

T = TypeVar("T", bound=Entity)
ID = TypeVar("ID")
V = TypeVar("V", bound=Entity)

StatementParams = Mapping[str, Any] | Entity | None


class BaseDao(ABC, Generic[T, ID]):
    """Abstract CRUD / paging / batch / named-statement interface for one entity type."""

    # --- query by example ---

    @abstractmethod
    async def select_one(self, template: T) -> T | None:
        """Return the single entity matching template, or None.

        Raises InvalidArgumentError if template is None and
        TooManyResultsError if more than one row matches.
        """

    @abstractmethod
    async def select_by_id(self, id: ID) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def select_list(
        self, template: T | None = None, page_request: PageRequest | None = None
    ) -> list[T]:
        """Return matching entities; None template matches everything.

        With a page descriptor the result is one page, returned as a
        PagedList whose total_elements comes from an extra count query.
        """

    @abstractmethod
    async def select_all(self) -> list[T]:
        """Return every record."""

    @abstractmethod
    async def select_map(
        self,
        template: T | None,
        key_field: str,
        page_request: PageRequest | None = None,
    ) -> dict[Any, T]:
        """Return matching entities keyed by key_field; duplicate keys keep the last row."""

    @abstractmethod
    async def select_page_list(
        self, template: T | None = None, page_request: PageRequest | None = None
    ) -> Page[T]:
        """Return a Page of matching entities; the total count is always computed."""

    @abstractmethod
    async def select_count(self, template: T | None = None) -> int:
        """Return the number of matching records (all records for None)."""

    # --- writes ---

    @abstractmethod
    async def insert(self, entity: T) -> ID:
        """Persist entity and return its effective primary key.

        A blank key is generated first and set on entity.
        """

    @abstractmethod
    async def delete(self, template: T) -> int:
        """Delete records matching template and return the affected-row count.

        Only set, non-None fields constrain the match. A template with no such
        fields matches every record, so delete(User()) behaves like delete_all().
        """

    @abstractmethod
    async def delete_by_id(self, id: ID) -> int:
        """Delete the record with the given key and return the affected-row count."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every record. Irreversible; returns the affected-row count."""

    @abstractmethod
    async def update_by_id(self, entity: T) -> int:
        """Overwrite every mapped field of the record identified by entity.id."""

    @abstractmethod
    async def update_by_id_selective(self, entity: T) -> int:
        """Write only the fields explicitly set on entity; others stay untouched."""

    # --- batch ---

    @abstractmethod
    async def delete_by_id_in_batch(self, ids: Sequence[ID] | None) -> None:
        """Delete by key; None or empty is a no-op."""

    @abstractmethod
    async def insert_in_batch(self, entities: Sequence[T] | None) -> None:
        """Insert every entity (keys generated as for insert); None or empty is a no-op."""

    @abstractmethod
    async def update_in_batch(self, entities: Sequence[T] | None) -> None:
        """Selectively update every entity by key; None or empty is a no-op."""

    # --- named statements ---

    @abstractmethod
    async def execute_sql(
        self,
        execute_type: DbExecuteType,
        statement_id: str,
        params: StatementParams = None,
        result_type: type[V] | None = None,
    ) -> list[Any]:
        """Run a registered statement; reads return typed rows, writes return []."""

    @abstractmethod
    async def run_sql(
        self,
        execute_type: DbExecuteType,
        statement_id: str,
        params: StatementParams = None,
    ) -> list[Any]:
        """Run a registered statement; reads return raw dict rows, writes return [rowcount]."""

    @abstractmethod
    async def select_one_by_statement(
        self, statement_id: str, template: T, result_type: type[V] | None = None
    ) -> Any:
        """Single-row variant of select_one sourced from a registered statement."""

    @abstractmethod
    async def select_all_by_statement(
        self,
        statement_id: str,
        template: T | None = None,
        result_type: type[V] | None = None,
    ) -> list[Any]:
        """Every row produced by a registered statement."""

    @abstractmethod
    async def select_page_by_statement(
        self,
        statement_id: str,
        template: T | None,
        page_request: PageRequest | None,
        result_type: type[V] | None = None,
    ) -> Page[Any]:
        """One page of a registered statement's rows; the total count is always computed."""

    @abstractmethod
    async def select_page_by_query(
        self, query: Query, result_type: type[V] | None = None
    ) -> Page[Any]:
        """One page of query.statement_id bound with query.params and query.page_request."""
