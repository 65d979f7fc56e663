import logging
from typing import Any

from libs.result import Error, Result, Return
from src.app.repositories.errors import StorageRejected, StorageUnavailable
from src.app.services.record_clock import RecordClock, default_clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import generate_uuid
from src.domain.entities import LOG_GROUP, LogRecord

from .dtos import IngestLogResponse
from .validation import DEFAULT_MAX_MESSAGE_LENGTH, parse_log_input

logger = logging.getLogger(__name__)


class IngestLogUseCase:
    """
    Ingest Log Use Case

    Command/Response Pattern:
    - Input: untyped payload (decoded request body)
    - Output: Result[IngestLogResponse]

    Business Logic:
    1. Parse payload into CreateLogCommand (first failure wins)
    2. Mint a random id and a server-side occurred_at
    3. Store the record and commit
    4. Return id and occurred_at

    Not idempotent: every call mints a new id, so a caller retrying after
    an ambiguous failure may store the same message twice.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: RecordClock = default_clock,
        max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH,
        group: str = LOG_GROUP,
    ):
        self.uow = uow
        self.clock = clock
        self.max_message_length = max_message_length
        self.group = group

    async def execute(self, payload: Any) -> Result[IngestLogResponse]:
        """
        Execute ingest use case

        Args:
            payload: Decoded request body, shape not yet checked

        Returns:
            Result[IngestLogResponse] with the assigned id and occurred_at
            or Error(INVALID_INPUT) with the validation reason
            or Error(STORAGE_UNAVAILABLE / STORAGE_REJECTED / INTERNAL_ERROR)
        """
        parsed = parse_log_input(payload, max_message_length=self.max_message_length)
        if parsed.is_err():
            return Return.err(parsed.error)

        command = parsed.value
        record_id = generate_uuid()
        occurred_at = self.clock.next()
        record = LogRecord(
            id=record_id,
            occurred_at=occurred_at,
            severity=command.severity,
            message=command.message,
            group=self.group,
        )

        try:
            async with self.uow:
                await self.uow.log_records.put(record)
                await self.uow.commit()
        except StorageRejected as exc:
            logger.critical(f"Storage rejected validated log record {record_id}: {exc}")
            return Return.err(Error(StorageRejected.code, "Log record was rejected by storage"))
        except StorageUnavailable as exc:
            logger.error(f"Storage unavailable while storing log record {record_id}: {exc}")
            return Return.err(Error(StorageUnavailable.code, "Storage is temporarily unavailable"))
        except Exception:
            logger.exception(f"Unexpected error while storing log record {record_id}")
            return Return.err(Error("INTERNAL_ERROR", "Unexpected error while storing log record"))

        logger.info(f"Stored log record {record_id} ({command.severity.value})")

        return Return.ok(IngestLogResponse(id=record_id, occurred_at=occurred_at))
