"""
In-memory storage engine.

InMemoryLogStore is the process-wide store: a dict keyed by id (primary)
plus, per group, a list of (occurred_at, id) kept sorted (secondary index).
Both are updated in the same synchronous step, so no reader on the event
loop ever sees one without the other.

InMemoryLogRecordRepository stages writes until its unit of work commits.
"""

import bisect
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from src.app.repositories.errors import StorageRejected
from src.app.repositories.log_record_repository import ILogRecordRepository
from src.domain.entities import LogRecord, Severity


class InMemoryLogStore:
    def __init__(self):
        self._records: Dict[str, LogRecord] = {}
        self._index: Dict[str, List[Tuple[str, str]]] = defaultdict(list)

    def check(self, record: LogRecord) -> None:
        if not record.id or not record.occurred_at or not record.group:
            raise StorageRejected("Record is missing id, occurred_at or group")
        if record.severity not in Severity.values():
            raise StorageRejected(f"Record has unknown severity {record.severity!r}")
        if not isinstance(record.message, str) or not record.message.strip():
            raise StorageRejected("Record has an empty message")
        if record.id in self._records:
            raise StorageRejected(f"Record {record.id} already exists")

    def insert_many(self, records: Iterable[LogRecord]) -> None:
        records = list(records)
        ids = set()
        for record in records:
            self.check(record)
            if record.id in ids:
                raise StorageRejected(f"Record {record.id} already exists")
            ids.add(record.id)

        for record in records:
            self._records[record.id] = record
            bisect.insort(self._index[record.group], (record.occurred_at, record.id))

    def scan_recent(self, group: str, limit: int) -> List[LogRecord]:
        if limit <= 0:
            return []
        keys = self._index.get(group, [])
        return [self._records[record_id] for _, record_id in reversed(keys[-limit:])]

    def get(self, record_id: str) -> Optional[LogRecord]:
        return self._records.get(record_id)

    def __len__(self) -> int:
        return len(self._records)


class InMemoryLogRecordRepository(ILogRecordRepository):
    """LogRecord repository backed by an InMemoryLogStore"""

    def __init__(self, store: InMemoryLogStore):
        self.store = store
        self.pending: List[LogRecord] = []

    async def put(self, record: LogRecord) -> LogRecord:
        self.store.check(record)
        self.pending.append(record)
        return record

    async def query_recent(self, group: str, limit: int) -> List[LogRecord]:
        return self.store.scan_recent(group, limit)

    async def get_by_id(self, record_id: str) -> Optional[LogRecord]:
        return self.store.get(record_id)

    async def count(self) -> int:
        return len(self.store)
