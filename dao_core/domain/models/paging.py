"""Paging domain models.

Order / Sort  : ordered (property, direction) terms for ORDER BY
PageRequest   : zero-based page descriptor: page_number, page_size, sort
Page          : one slice of a result set plus its total count
PagedList     : list returned by select_list() when a page descriptor is given

Pages are zero indexed: page_number=0 is the first page. Callers must not
convert to one-based numbering.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import InvalidArgumentError
from .enums import Direction

T = TypeVar("T")
U = TypeVar("U")


class Order(BaseModel):
    """One ORDER BY term. property must be a non-blank field name."""

    model_config = ConfigDict(frozen=True)

    property: str
    direction: Direction = Direction.ASC

    @field_validator("property")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Property must not be null or empty")
        return value

    @classmethod
    def asc(cls, property: str) -> Order:
        return cls(property=property, direction=Direction.ASC)

    @classmethod
    def desc(cls, property: str) -> Order:
        return cls(property=property, direction=Direction.DESC)

    def __str__(self) -> str:
        return f"{self.property}: {self.direction.value.upper()}"


class Sort(BaseModel):
    """Ordered sequence of Order terms; empty means unsorted."""

    model_config = ConfigDict(frozen=True)

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> Sort:
        if not properties:
            raise ValueError("You have to provide at least one property to sort by")
        return cls(orders=tuple(Order(property=p, direction=direction) for p in properties))

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    def and_(self, other: Sort | None) -> Sort:
        if other is None:
            return self
        return Sort(orders=self.orders + other.orders)

    def get_order_for(self, property: str) -> Order | None:
        for order in self.orders:
            if order.property == property:
                return order
        return None

    def __iter__(self) -> Iterator[Order]:  # type: ignore[override]
        return iter(self.orders)

    def __bool__(self) -> bool:
        return bool(self.orders)

    def __str__(self) -> str:
        return ",".join(str(order) for order in self.orders) if self.orders else "UNSORTED"


def _check_bounds(page_number: int, page_size: int) -> None:
    if page_number < 0:
        raise InvalidArgumentError(f"Page number must not be less than zero, got {page_number}")
    if page_size < 1:
        raise InvalidArgumentError(f"Page size must not be less than one, got {page_size}")


class PageRequest(BaseModel):
    """Immutable zero-based page descriptor.

    page_number >= 0 and page_size >= 1 are enforced at construction and raise
    InvalidArgumentError.
    Equality and hashing are structural over (page_number, page_size, sort).
    """

    model_config = ConfigDict(frozen=True)

    page_number: int = 0
    page_size: int = 20
    sort: Sort | None = None

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        _check_bounds(self.page_number, self.page_size)

    @classmethod
    def of(cls, page: int, size: int, sort: Sort | None = None) -> PageRequest:
        return cls(page_number=page, page_size=size, sort=sort)

    @classmethod
    def of_sorted(
        cls, page: int, size: int, direction: Direction, *properties: str
    ) -> PageRequest:
        """Page request sorted by the given properties in one direction."""
        return cls(page_number=page, page_size=size, sort=Sort.by(*properties, direction=direction))

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page_number > 0

    def next(self) -> PageRequest:
        return PageRequest(page_number=self.page_number + 1, page_size=self.page_size, sort=self.sort)

    def previous(self) -> PageRequest:
        if self.page_number == 0:
            return self
        return PageRequest(page_number=self.page_number - 1, page_size=self.page_size, sort=self.sort)

    def first(self) -> PageRequest:
        return PageRequest(page_number=0, page_size=self.page_size, sort=self.sort)

    def previous_or_first(self) -> PageRequest:
        return self.previous() if self.has_previous else self.first()

    def __str__(self) -> str:
        sort = None if self.sort is None else str(self.sort)
        return f"Page request [number: {self.page_number}, size {self.page_size}, sort: {sort}]"


class Page(BaseModel, Generic[T]):
    """One page of results with the total count across all pages.

    Build with Page.of(); content may not exceed the descriptor's page_size.
    total_pages = ceil(total_elements / page_size).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: tuple[T, ...] = ()
    page_number: int
    page_size: int
    sort: Sort | None = None
    total_elements: int

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        _check_bounds(self.page_number, self.page_size)
        if self.total_elements < 0:
            raise InvalidArgumentError(
                f"Total elements must not be less than zero, got {self.total_elements}"
            )
        if len(self.content) > self.page_size:
            raise InvalidArgumentError(
                f"content size ({len(self.content)}) must not exceed page_size ({self.page_size})"
            )

    @classmethod
    def of(
        cls, content: Iterable[T], page_request: PageRequest, total_elements: int
    ) -> Page[T]:
        return cls(
            content=tuple(content),
            page_number=page_request.page_number,
            page_size=page_request.page_size,
            sort=page_request.sort,
            total_elements=total_elements,
        )

    @property
    def page_request(self) -> PageRequest:
        return PageRequest(page_number=self.page_number, page_size=self.page_size, sort=self.sort)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 0

    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @property
    def is_last(self) -> bool:
        return self.page_number == self.total_pages - 1 or self.total_pages == 0

    def next_page_request(self) -> PageRequest | None:
        return self.page_request.next() if self.has_next else None

    def previous_page_request(self) -> PageRequest | None:
        return self.page_request.previous() if self.has_previous else None

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with transformed content and the same metadata."""
        return Page.of([fn(item) for item in self.content], self.page_request, self.total_elements)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)


class PagedList(list, Generic[T]):
    """Page content returned by select_list() when a page descriptor is given.

    total_elements is filled from the count query that the descriptor triggers.
    """

    def __init__(
        self,
        items: Sequence[T] = (),
        page_request: PageRequest | None = None,
        total_elements: int = 0,
    ) -> None:
        super().__init__(items)
        self.page_request = page_request
        self.total_elements = total_elements

    def to_page(self) -> Page[Any]:
        if self.page_request is None:
            raise ValueError("PagedList has no page request")
        return Page.of(self, self.page_request, self.total_elements)
