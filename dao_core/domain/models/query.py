"""Dynamic query parameter object for named ad-hoc statements.

A Query names a registered statement, carries its bind parameters, and
optionally a page descriptor. Parameter shapes are statement-specific, so
values are not validated here; the backend rejects what it cannot bind.

Query instances are mutable and owned by a single call site. Do not share
one across concurrent requests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .paging import PageRequest


class Query(BaseModel):
    statement_id: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)
    page_request: PageRequest | None = None

    @classmethod
    def for_statement(
        cls,
        statement_id: str,
        page_request: PageRequest | None = None,
        **params: Any,
    ) -> Query:
        """Named constructor: statement id first, bind parameters as kwargs."""
        return cls(statement_id=statement_id, params=params, page_request=page_request)

    def set_param(self, name: str, value: Any) -> Query:
        self.params[name] = value
        return self

    def get_param(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)

    def has_param(self, name: str) -> bool:
        return name in self.params

    def remove_param(self, name: str) -> Any:
        return self.params.pop(name, None)

    def set_page_request(self, page_request: PageRequest | None) -> Query:
        self.page_request = page_request
        return self

    def get_page_request(self) -> PageRequest | None:
        return self.page_request

    def set_statement_id(self, statement_id: str) -> Query:
        self.statement_id = statement_id
        return self
