"""
Log Service Domain Entities

All domain entities organized by model.
"""

from .enums import Severity
from .log_record import LOG_GROUP, LogRecord

__all__ = [
    # Enums
    "Severity",
    # Entities
    "LogRecord",
    "LOG_GROUP",
]
