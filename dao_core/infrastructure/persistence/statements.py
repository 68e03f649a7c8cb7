"""Registry of named ad-hoc statements.

Statements are SQLAlchemy executables (select(), insert(), update(),
delete(), or text()) registered under an identifier such as
"user.selectActive". Plain strings are wrapped with text(). DAOs look
statements up by id at call time; the registry is populated once at
application start and only read afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from sqlalchemy import text
from sqlalchemy.sql.expression import Executable

from dao_core.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class StatementRegistry:
    def __init__(self, statements: Mapping[str, Executable | str] | None = None) -> None:
        self._statements: dict[str, Executable] = {}
        for statement_id, statement in (statements or {}).items():
            self.register(statement_id, statement)

    def register(self, statement_id: str, statement: Executable | str) -> None:
        if not statement_id or not statement_id.strip():
            raise InvalidArgumentError("statement_id must not be blank")
        if statement_id in self._statements:
            raise InvalidArgumentError(f"Statement {statement_id!r} is already registered")
        if isinstance(statement, str):
            statement = text(statement)
        self._statements[statement_id] = statement
        logger.debug("Registered statement %s", statement_id)

    def get(self, statement_id: str | None) -> Executable:
        if not statement_id:
            raise InvalidArgumentError("statement_id must not be blank")
        try:
            return self._statements[statement_id]
        except KeyError:
            raise InvalidArgumentError(f"Unknown statement {statement_id!r}") from None

    def ids(self) -> list[str]:
        return sorted(self._statements)

    def __contains__(self, statement_id: object) -> bool:
        return statement_id in self._statements

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(self._statements)
