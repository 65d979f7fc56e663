"""
Log Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- CreateLogCommand: validated ingest intent (output of parse_log_input)
- IngestLogResponse: identity assigned to a stored record
- RecentLogsResponse: newest-first page of records

Response fields serialize in camelCase (occurred_at -> occurredAt).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from src.domain.entities import LogRecord, Severity


class CreateLogCommand(BaseModel):
    """
    Create log command - represents validated ingest intent

    Only ever built by parse_log_input, so severity and message are
    known to be valid.
    """

    severity: Severity
    message: str


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IngestLogResponse(WireModel):
    """Server-assigned identity of the stored record"""

    success: bool = True
    id: str
    occurred_at: str


class LogRecordView(WireModel):
    """Single log record in a response"""

    id: str
    occurred_at: str
    severity: Severity
    message: str
    group: str

    @classmethod
    def from_entity(cls, record: LogRecord) -> "LogRecordView":
        return cls(
            id=record.id,
            occurred_at=record.occurred_at,
            severity=record.severity,
            message=record.message,
            group=record.group,
        )


class RecentLogsResponse(WireModel):
    """
    Most recent records, newest first.

    count is derived from records, never tracked separately.
    """

    records: List[LogRecordView]

    @computed_field
    @property
    def count(self) -> int:
        return len(self.records)
