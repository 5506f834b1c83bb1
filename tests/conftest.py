from decimal import Decimal

import pytest
import pytest_asyncio
from libs.common.config import get_settings
from services.admin_api_service.mapper import PricingConfig, ResponseMapper
from services.admin_api_service.seed import seed_test_data


@pytest_asyncio.fixture
async def seeded_shop(store):
    """The fixture shop loaded by the seed routine."""
    return await seed_test_data(store, get_settings())


@pytest.fixture
def pricing() -> PricingConfig:
    return PricingConfig(
        shipping_price=Decimal("10.00"),
        tax_rate=Decimal("0.08"),
        currency_code="USD",
        platform="shopify",
    )


@pytest.fixture
def mapper(pricing) -> ResponseMapper:
    return ResponseMapper(pricing)
