from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import LogRecord


class ILogRecordRepository(ABC):
    """LogRecord repository interface - application layer

    Two access paths:
    - primary key: id (random, unordered)
    - secondary index: (group, occurred_at), scanned newest first
    """

    @abstractmethod
    async def put(self, record: LogRecord) -> LogRecord:
        """
        Insert a new record (immutable).

        The record becomes visible to primary lookups and to the
        secondary index together.

        Raises:
            StorageUnavailable: transient infrastructure failure
            StorageRejected: the store refused the record as malformed
        """
        pass

    @abstractmethod
    async def query_recent(self, group: str, limit: int) -> List[LogRecord]:
        """
        Get up to `limit` records of `group` ordered by occurred_at DESC.

        Records sharing an occurred_at are ordered by id DESC.
        Returns an empty list when the group holds no records.

        Raises:
            StorageUnavailable: transient infrastructure failure
        """
        pass

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Optional[LogRecord]:
        """Get record by primary key"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored records"""
        pass
