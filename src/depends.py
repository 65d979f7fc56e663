from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.in_memory_log_record_repository import InMemoryLogStore
from src.adapter.services.engine import build_engine
from src.adapter.services.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
import src.domain.entities  # noqa: F401  registers log_records on SQLModel.metadata

# Long-lived storage handles, shared by every request
engine = build_engine(ApplicationConfig.DB_URI, ApplicationConfig.STORAGE_TIMEOUT_SECONDS)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

memory_store = InMemoryLogStore()


async def get_unit_of_work():
    if ApplicationConfig.STORAGE_BACKEND == "memory":
        yield InMemoryUnitOfWork(memory_store)
        return

    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(
            session, timeout=ApplicationConfig.STORAGE_TIMEOUT_SECONDS
        )
