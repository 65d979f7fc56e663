from typing import Any, Dict, Optional

from fastapi import status
from libs.result import Error

GENERIC_SERVER_ERROR_MESSAGE = "Internal server error"

RECENT_LOGS_ROUTE = "read_recent_logs"


def default_failure_body() -> Dict[str, Any]:
    return {"success": False, "message": GENERIC_SERVER_ERROR_MESSAGE}


def recent_logs_failure_body() -> Dict[str, Any]:
    return {"count": 0, "records": [], "error": GENERIC_SERVER_ERROR_MESSAGE}


# Routes whose 500 body is not {success, message}, keyed by route name
ROUTE_FAILURE_BODIES = {
    RECENT_LOGS_ROUTE: recent_logs_failure_body,
}


def failure_body_for(route_name: Optional[str]) -> Dict[str, Any]:
    return ROUTE_FAILURE_BODIES.get(route_name, default_failure_body)()


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Failure that must not leak detail to the caller.

    body is the well-formed response returned instead of the real cause;
    routes whose success shape differs from {success, message} pass their own.
    """

    def __init__(self, base_error: Error, body: Optional[Dict[str, Any]] = None):
        self.base_error = base_error
        self.body = body or default_failure_body()
        super().__init__(base_error.message)
