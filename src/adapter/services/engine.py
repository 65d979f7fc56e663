"""
Async engine construction.

Statement timeouts via asyncio.wait_for do not cover the commit, which is
never cancelled once sent. The commit's wait is bounded by the driver instead:
the SQLite busy timeout for aiosqlite, the command timeout for asyncpg, and
the pool checkout timeout for every pooled non-SQLite backend.
"""

from typing import Any, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def storage_engine_options(db_uri: str, timeout: float) -> Dict[str, Any]:
    url = make_url(db_uri)
    if url.get_backend_name() == "sqlite":
        return {"connect_args": {"timeout": timeout}}

    options: Dict[str, Any] = {"pool_timeout": timeout}
    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {"command_timeout": timeout}
    return options


def build_engine(db_uri: str, timeout: float) -> AsyncEngine:
    return create_async_engine(
        db_uri, echo=False, future=True, **storage_engine_options(db_uri, timeout)
    )
