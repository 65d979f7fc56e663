"""
Translation of SQLAlchemy failures into storage engine errors.

Every storage call goes through run_guarded so it is bounded by a timeout
and surfaces only StorageUnavailable / StorageRejected to the application
layer.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Awaitable, TypeVar

from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from src.app.repositories.errors import StorageRejected, StorageUnavailable

T = TypeVar("T")

DEFAULT_STORAGE_TIMEOUT_SECONDS = 5.0


@asynccontextmanager
async def storage_errors(operation: str):
    try:
        yield
    except (IntegrityError, DataError) as exc:
        raise StorageRejected(f"{operation} rejected: {exc.orig}") from exc
    except (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError) as exc:
        raise StorageUnavailable(f"{operation} failed: {exc}") from exc
    except TimeoutError as exc:
        raise StorageUnavailable(f"{operation} timed out") from exc


async def run_guarded(operation: str, awaitable: Awaitable[T], timeout: float) -> T:
    async with storage_errors(operation):
        return await asyncio.wait_for(awaitable, timeout)
