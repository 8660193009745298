"""Gateway executing parameterized statements against the store."""
from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from sqlalchemy import text
from sqlalchemy.exc import DataError, DBAPIError, SQLAlchemyError, StatementError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..core.errors import StoreDataError, StoreFailure

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"(?<![:\w]):p(\d+)\b")


def placeholder(position: int) -> str:
    """Return the 1-based positional placeholder used in statement templates."""

    return f":p{position}"


@dataclass(slots=True)
class Statement:
    """A statement template together with its ordered parameters."""

    template: str
    params: list[Any] = field(default_factory=list)

    def bind(self, value: Any) -> str:
        """Append a parameter and return the placeholder that refers to it."""

        self.params.append(value)
        return placeholder(len(self.params))


def check_placeholders(template: str, params: list[Any]) -> None:
    """Raise ValueError unless placeholders run :p1..:pN once each, in order."""

    found = [int(number) for number in _PLACEHOLDER.findall(template)]
    expected = list(range(1, len(params) + 1))
    if found != expected:
        raise ValueError(
            f"Statement placeholders {found} do not match {len(params)} parameters"
        )


class StoreGateway:
    """Executes one statement per call inside its own transaction."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        engine: AsyncEngine | None = None,
        default_timeout: float | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine = engine
        self._default_timeout = default_timeout

    async def execute(
        self,
        template: str,
        params: Iterable[Any] = (),
        *,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]:
        """Run the template with positional parameters and return the rows.

        Raises StoreFailure when the store call fails or the deadline passes.
        """

        params = list(params)
        check_placeholders(template, params)
        bind = {f"p{index}": value for index, value in enumerate(params, start=1)}
        deadline = timeout if timeout is not None else self._default_timeout

        logger.debug("Executing statement with %d parameters: %s", len(params), template.strip())
        try:
            return await asyncio.wait_for(self._run(template, bind), deadline)
        except asyncio.TimeoutError as exc:
            logger.error("Statement timed out after %ss", deadline)
            raise StoreFailure(f"Statement timed out after {deadline}s", template) from exc
        except DataError as exc:
            logger.error("Store rejected a parameter: %s", exc.orig)
            raise StoreDataError(str(exc.orig), template) from exc
        except StatementError as exc:
            if isinstance(exc, DBAPIError):
                logger.error("Store error: %s", exc.orig)
                raise StoreFailure(str(exc.orig), template) from exc
            logger.error("Could not bind parameters: %s", exc.orig)
            raise StoreDataError(str(exc.orig), template) from exc
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Store unavailable: %s", exc)
            raise StoreFailure(str(exc), template) from exc

    async def execute_statement(
        self, statement: Statement, *, timeout: float | None = None
    ) -> list[dict[str, Any]]:
        """Run a built Statement; see execute."""

        return await self.execute(statement.template, statement.params, timeout=timeout)

    async def dispose(self) -> None:
        """Close pooled connections."""

        if self._engine is not None:
            await self._engine.dispose()

    async def _run(self, template: str, bind: dict[str, Any]) -> list[dict[str, Any]]:
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(text(template), bind)
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings()]
