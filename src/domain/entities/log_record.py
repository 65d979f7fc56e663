"""
LogRecord Entity

Immutable log entry. Written once by the ingest path, read back newest first.
"""

from sqlmodel import Column, Field, Index, SQLModel, String, Text

from src.domain.base import generate_uuid

from .enums import Severity

# Every record carries the same group value so the (group, occurred_at) index
# is one ordered sequence and "most recent N" is a bounded prefix scan.
# If writes on that single partition ever become a hotspot, shard the group by
# day (e.g. "LOG#2026-10-19") and merge the per-bucket scans on read.
LOG_GROUP = "LOG"

# Width of "YYYY-MM-DDTHH:MM:SS.ffffffZ"
OCCURRED_AT_WIDTH = 27


class LogRecord(SQLModel, table=True):
    """
    LogRecord entity - one immutable log entry.

    Business Rules:
    - id is a random UUID4 minted by the store, never supplied by clients
    - occurred_at is assigned server-side at insert, fixed-width UTC ISO-8601
      so string order equals time order
    - severity is one of info/warning/error
    - message is non-empty after trimming, stored exactly as received
    - Never updated or deleted
    """

    __tablename__ = "log_records"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    occurred_at: str = Field(
        sa_column=Column(String(OCCURRED_AT_WIDTH), nullable=False)
    )
    severity: Severity
    message: str = Field(sa_column=Column(Text, nullable=False))
    group: str = Field(default=LOG_GROUP, max_length=64)

    __table_args__ = (
        Index("ix_log_records_group_occurred_at", "group", "occurred_at", "id"),
    )
