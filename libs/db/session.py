from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from libs.db.base import Base
from libs.db.config import AsyncSessionLocal


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields an async database session.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create every table registered on ``Base.metadata``.

    Models must be imported before this runs so their tables are registered.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
