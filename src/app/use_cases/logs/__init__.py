"""
Log Use Cases

Ingest path and recency read path.
"""

from .dtos import CreateLogCommand, IngestLogResponse, LogRecordView, RecentLogsResponse
from .ingest_log_use_case import IngestLogUseCase
from .read_recent_logs_use_case import RECENT_LOGS_LIMIT, ReadRecentLogsUseCase
from .validation import INVALID_INPUT, parse_log_input

__all__ = [
    "CreateLogCommand",
    "IngestLogResponse",
    "LogRecordView",
    "RecentLogsResponse",
    "IngestLogUseCase",
    "ReadRecentLogsUseCase",
    "RECENT_LOGS_LIMIT",
    "INVALID_INPUT",
    "parse_log_input",
]
