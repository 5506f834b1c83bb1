from decimal import Decimal
from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    # Application
    ENVIRONMENT: Literal["local", "test", "development", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "shop-admin-mock"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./shop_admin_mock.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    # Create tables on startup (local/test convenience; managed DBs use alembic)
    DB_AUTO_CREATE: bool = True

    # Platform emulation
    PLATFORM_NAME: str = "shopify"
    ACCESS_TOKEN_HEADER: str = "X-Shopify-Access-Token"
    DEFAULT_TENANT_TOKEN: str = "default"
    CURRENCY_CODE: str = "USD"
    SHIPPING_PRICE: Decimal = Decimal("10.00")
    TAX_RATE: Decimal = Decimal("0.08")
    ORDERS_PAGE_SIZE: int = 100
    VARIANTS_PAGE_SIZE: int = 10

    # Seed fixture shop
    SEED_SHOP_NAME: str = "test-shop.myshopify.com"
    SEED_ACCESS_TOKEN: str = "shpat_1234567890abcdef"

    # Downstream backend notified by the simulation endpoints
    BACKEND_URL: str = "http://localhost:3001"
    BACKEND_SYNC_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str]) -> str:
        if isinstance(v, str):
            if v.startswith("postgresql://"):
                return v.replace("postgresql://", "postgresql+psycopg://", 1)
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """
    Return the global settings instance, cached.
    """
    return Settings()
