import logging

from libs.result import Error, Result, Return
from src.app.repositories.errors import StorageError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LOG_GROUP

from .dtos import LogRecordView, RecentLogsResponse

logger = logging.getLogger(__name__)

RECENT_LOGS_LIMIT = 100


class ReadRecentLogsUseCase:
    """
    Use case for reading the most recent log records.

    Business Rules:
    - Fixed page size (100 by default), no cursor
    - Results ordered by occurred_at, newest first
    - An empty store is a successful empty page
    - Storage failures are errors, never an empty page
    """

    def __init__(
        self, uow: UnitOfWork, limit: int = RECENT_LOGS_LIMIT, group: str = LOG_GROUP
    ):
        self.uow = uow
        self.limit = limit
        self.group = group

    async def execute(self) -> Result[RecentLogsResponse]:
        try:
            async with self.uow:
                records = await self.uow.log_records.query_recent(self.group, self.limit)
                # Views are built before the unit of work rolls back and expires the rows
                response = RecentLogsResponse(
                    records=[LogRecordView.from_entity(r) for r in records]
                )
        except StorageError as exc:
            logger.error(f"Storage failure while reading recent log records: {exc}")
            return Return.err(Error(exc.code, "Storage is temporarily unavailable"))
        except Exception:
            logger.exception("Unexpected error while reading recent log records")
            return Return.err(Error("INTERNAL_ERROR", "Unexpected error while reading log records"))

        logger.info(f"Retrieved {response.count} log records")

        return Return.ok(response)
