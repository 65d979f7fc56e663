import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.repositories.in_memory_log_record_repository import InMemoryLogStore
from src.adapter.services.unit_of_work import InMemoryUnitOfWork


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.log_records = MagicMock()
    uow.log_records.put = AsyncMock()
    uow.log_records.query_recent = AsyncMock(return_value=[])
    return uow


@pytest.fixture
def memory_store():
    return InMemoryLogStore()


@pytest.fixture
def memory_uow(memory_store):
    return InMemoryUnitOfWork(memory_store)
