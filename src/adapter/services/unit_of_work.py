from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.in_memory_log_record_repository import (
    InMemoryLogRecordRepository,
    InMemoryLogStore,
)
from src.adapter.repositories.log_record_repository import LogRecordRepository
from src.adapter.services.storage_errors import (
    DEFAULT_STORAGE_TIMEOUT_SECONDS,
    storage_errors,
)
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, timeout: float = DEFAULT_STORAGE_TIMEOUT_SECONDS):
        self.session = session
        self.timeout = timeout

    async def __aenter__(self):
        self.log_records = LogRecordRepository(self.session, timeout=self.timeout)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        # Not cancelled once sent; the driver timeout set in build_engine bounds the wait.
        async with storage_errors("commit"):
            await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


class InMemoryUnitOfWork(UnitOfWork):
    """UnitOfWork over an InMemoryLogStore; writes apply on commit"""

    def __init__(self, store: InMemoryLogStore):
        self.store = store

    async def __aenter__(self):
        self.log_records = InMemoryLogRecordRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self.store.insert_many(self.log_records.pending)
        self.log_records.pending.clear()

    async def rollback(self):
        self.log_records.pending.clear()
