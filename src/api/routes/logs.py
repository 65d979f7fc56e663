"""
Log API Routes

Ingest endpoint and most-recent-records endpoint.
"""

import json

from fastapi import APIRouter, Depends, Request, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import (
    RECENT_LOGS_ROUTE,
    ClientError,
    ServerError,
    recent_logs_failure_body,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.logs import (
    INVALID_INPUT,
    IngestLogResponse,
    IngestLogUseCase,
    ReadRecentLogsUseCase,
    RecentLogsResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/logs", tags=["Logs"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=IngestLogResponse)
async def ingest_log(request: Request, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Ingest Log Record

    Body is read raw (not through a Pydantic model) so validation runs
    in the fixed order of parse_log_input and reports only the first failure.
    An empty body is treated as {}.

    Returns:
        - 201 Created: {success: true, id, occurredAt}

    Raises:
        - 400 Bad Request: Invalid JSON or validation failure
        - 500 Internal Server Error: Storage failure (generic message)
    """
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body) if raw_body else {}
    except ValueError:
        raise ClientError(Error("INVALID_JSON", "Invalid JSON in request body"))

    use_case = IngestLogUseCase(
        uow, max_message_length=ApplicationConfig.MAX_MESSAGE_LENGTH, group=ApplicationConfig.LOG_GROUP
    )
    result = await use_case.execute(payload)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == INVALID_INPUT:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "/recent",
    status_code=status.HTTP_200_OK,
    response_model=RecentLogsResponse,
    name=RECENT_LOGS_ROUTE,
)
async def read_recent_logs(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Most Recent Log Records

    Returns:
        - 200 OK: {count, records} newest first, at most RECENT_LOGS_LIMIT

    Raises:
        - 500 Internal Server Error: {count: 0, records: [], error} so the
          body stays consumable while remaining distinct from an empty store
    """
    use_case = ReadRecentLogsUseCase(
        uow, limit=ApplicationConfig.RECENT_LOGS_LIMIT, group=ApplicationConfig.LOG_GROUP
    )
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error, body=recent_logs_failure_body())

    return result.value
