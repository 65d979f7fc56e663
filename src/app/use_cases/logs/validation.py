"""
Ingest payload parsing

Turns an untyped request payload into a CreateLogCommand or the first
validation failure found (fail-fast, checks run in a fixed order).
"""

from typing import Any

from libs.result import Error, Result, Return
from src.domain.entities import Severity

from .dtos import CreateLogCommand

INVALID_INPUT = "INVALID_INPUT"
DEFAULT_MAX_MESSAGE_LENGTH = 10000


def _invalid(message: str) -> Result[CreateLogCommand]:
    return Return.err(Error(INVALID_INPUT, message))


def _is_missing(payload: dict, field: str) -> bool:
    """Absent, null, "", 0 and false all count as missing; lists and objects do not"""
    value = payload.get(field)
    if isinstance(value, (dict, list)):
        return False
    return not value


def parse_log_input(
    payload: Any, max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
) -> Result[CreateLogCommand]:
    """
    Validate an ingest payload.

    Order:
    1. payload is an object
    2. severity present
    3. severity is one of info/warning/error
    4. message present
    5. message is a string
    6. message is not blank
    7. message within max_message_length

    A field is missing when absent or falsy (null, "", 0, false), so an
    empty message reports as missing rather than empty; "   " is empty.

    Any id/occurredAt/group keys in the payload are ignored; those
    are always assigned by the server.
    """
    if not isinstance(payload, dict):
        return _invalid("Request body must be a valid JSON object")

    if _is_missing(payload, "severity"):
        return _invalid("Missing required field: severity")

    severity = payload["severity"]
    if not isinstance(severity, str) or severity not in Severity.values():
        return _invalid(
            f"Invalid severity. Must be one of: {', '.join(Severity.values())}"
        )

    if _is_missing(payload, "message"):
        return _invalid("Missing required field: message")

    message = payload["message"]
    if not isinstance(message, str):
        return _invalid("Message must be a string")

    if not message.strip():
        return _invalid("Message cannot be empty")

    if len(message) > max_message_length:
        return _invalid(f"Message cannot exceed {max_message_length} characters")

    return Return.ok(CreateLogCommand(severity=Severity(severity), message=message))
