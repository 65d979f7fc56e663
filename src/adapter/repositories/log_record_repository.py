from typing import List, Optional

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.storage_errors import (
    DEFAULT_STORAGE_TIMEOUT_SECONDS,
    run_guarded,
)
from src.app.repositories.log_record_repository import ILogRecordRepository
from src.domain.entities import LogRecord


class LogRecordRepository(ILogRecordRepository):
    """LogRecord repository implementation using SQLModel

    The recency query walks ix_log_records_group_occurred_at backwards,
    so its cost follows `limit`, not the table size.
    """

    def __init__(self, session: AsyncSession, timeout: float = DEFAULT_STORAGE_TIMEOUT_SECONDS):
        self.session = session
        self.timeout = timeout

    async def put(self, record: LogRecord) -> LogRecord:
        """Insert a new record (immutable); visible to readers once the unit of work commits"""
        self.session.add(record)
        await run_guarded("put", self.session.flush(), self.timeout)
        return record

    async def query_recent(self, group: str, limit: int) -> List[LogRecord]:
        stmt = (
            select(LogRecord)
            .where(LogRecord.group == group)
            .order_by(LogRecord.occurred_at.desc(), LogRecord.id.desc())
            .limit(limit)
        )
        result = await run_guarded("query_recent", self.session.exec(stmt), self.timeout)
        return list(result.all())

    async def get_by_id(self, record_id: str) -> Optional[LogRecord]:
        return await run_guarded(
            "get_by_id", self.session.get(LogRecord, record_id), self.timeout
        )

    async def count(self) -> int:
        stmt = select(func.count()).select_from(LogRecord)
        result = await run_guarded("count", self.session.exec(stmt), self.timeout)
        return result.one()
