import re
from typing import Any, Dict, List, Protocol, Sequence

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql import text
from structlog import get_logger

from rental_catalog.config import Settings, settings as default_settings
from rental_catalog.core.errors import ConstraintViolationError, QueryExecutionError
from rental_catalog.utils.retry import retry

logger = get_logger()

_PLACEHOLDER = re.compile(r"\$(\d+)")


class QueryExecutor(Protocol):
    async def execute(self, statement: str, values: Sequence[Any]) -> List[Dict[str, Any]]:
        ...


def to_named_binds(statement: str, values: Sequence[Any]):
    """Rewrite ``$N`` placeholders as ``:pN`` binds so the statement can go through sqlalchemy.text()."""
    named = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", statement)
    params = {f"p{index}": value for index, value in enumerate(values, start=1)}
    return named, params


class SQLAlchemyExecutor:
    """
    Runs catalog statements on a SQLAlchemy async engine.

    Each statement gets its own connection and transaction, committed on success,
    so nothing is held between calls. The engine's pool is shared by every caller.
    """

    def __init__(self, engine: AsyncEngine, settings: Settings = default_settings):
        self.engine = engine
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "SQLAlchemyExecutor":
        engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, pool_pre_ping=True)
        return cls(engine, settings)

    async def execute(self, statement: str, values: Sequence[Any]) -> List[Dict[str, Any]]:
        named, params = to_named_binds(statement, values)
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(named), params)
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
        except IntegrityError as e:
            logger.warning("Constraint violation", error=str(e.orig))
            raise ConstraintViolationError(str(e.orig), statement=statement, original=e) from e
        except SQLAlchemyError as e:
            logger.error("Query execution failed", error=str(e), error_type=type(e).__name__)
            raise QueryExecutionError(str(e), statement=statement, original=e) from e
        except OSError as e:
            # Connection failures from the driver reach us unwrapped.
            logger.error("Database unreachable", error=str(e), error_type=type(e).__name__)
            raise QueryExecutionError(str(e), statement=statement, original=e) from e
        logger.debug("Query executed", row_count=len(rows))
        return rows

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def connect(self) -> None:
        """Verify the database is reachable, retrying with backoff before giving up."""
        check = retry(
            tries=self.settings.DB_CONNECT_TRIES,
            delay=self.settings.DB_CONNECT_DELAY,
            backoff=self.settings.DB_CONNECT_BACKOFF,
            exceptions=(OperationalError, OSError),
        )(self.ping)
        await check()
        logger.info("Database connection ready")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool disposed")

    async def __aenter__(self) -> "SQLAlchemyExecutor":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()
