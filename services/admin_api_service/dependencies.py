"""FastAPI dependencies that assemble the store, mapper and dispatch context."""

from typing import AsyncIterator

import httpx
from fastapi import Depends
from libs.common.config import Settings, get_settings
from libs.db.session import get_async_db
from services.admin_api_service.dispatcher import DispatchContext
from services.admin_api_service.mapper import PricingConfig, ResponseMapper
from services.admin_api_service.store import SqlAlchemyStore
from sqlalchemy.ext.asyncio import AsyncSession


def get_store(db: AsyncSession = Depends(get_async_db)) -> SqlAlchemyStore:
    return SqlAlchemyStore(db)


def get_mapper(settings: Settings = Depends(get_settings)) -> ResponseMapper:
    return ResponseMapper(PricingConfig.from_settings(settings))


def get_dispatch_context(
    store: SqlAlchemyStore = Depends(get_store),
    mapper: ResponseMapper = Depends(get_mapper),
    settings: Settings = Depends(get_settings),
) -> DispatchContext:
    return DispatchContext(store=store, mapper=mapper, settings=settings)


async def get_backend_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client for calls to the downstream backend."""
    async with httpx.AsyncClient(timeout=settings.BACKEND_SYNC_TIMEOUT) as client:
        yield client
