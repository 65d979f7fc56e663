"""
Use Cases

Organized into domain folders:
- logs/: Log ingest and recency reads
"""

from .logs import (
    IngestLogUseCase,
    ReadRecentLogsUseCase,
)

__all__ = [
    "IngestLogUseCase",
    "ReadRecentLogsUseCase",
]
