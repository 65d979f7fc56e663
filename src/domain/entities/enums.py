"""
Log Service Domain Enums
"""

from enum import Enum


class Severity(str, Enum):
    """Closed set of log severities"""

    info = "info"
    warning = "warning"
    error = "error"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]
