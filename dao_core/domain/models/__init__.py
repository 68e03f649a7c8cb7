"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .entity import ID_FIELD, Entity
from .enums import DbExecuteType, Direction
from .paging import Order, Page, PagedList, PageRequest, Sort
from .query import Query

__all__ = [
    # enums
    "DbExecuteType",
    "Direction",
    # entity
    "ID_FIELD",
    "Entity",
    # paging
    "Order",
    "Sort",
    "PageRequest",
    "Page",
    "PagedList",
    # query
    "Query",
]
