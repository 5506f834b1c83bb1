"""Map a presented access token to the shop that scopes a request."""

from typing import Mapping, Optional

from libs.common.logging import get_logger
from services.admin_api_service.models import Shop
from services.admin_api_service.store import SqlAlchemyStore

logger = get_logger(__name__)

EARLIEST_FIRST = [("created_at", "asc"), ("id", "asc")]


def extract_credential(
    headers: Mapping[str, str], token_header: str
) -> Optional[str]:
    """Read the access token from the platform header or a Bearer token."""
    token = headers.get(token_header)
    if token:
        return token.strip() or None

    authorization = headers.get("Authorization") or ""
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


async def resolve_tenant(
    store: SqlAlchemyStore, credential: Optional[str], default_token: str
) -> Optional[Shop]:
    """
    Resolve the scoping shop.

    No credential or the ``default_token`` sentinel selects the earliest shop.
    An unknown credential also falls back to the earliest shop rather than
    failing. Returns None only when there are no shops at all.
    """
    if credential and credential != default_token:
        shop = await store.find_one(Shop, {"access_token": credential})
        if shop is not None:
            return shop
        logger.info("Unknown access token; falling back to the default shop")

    shops = await store.find(Shop, order=EARLIEST_FIRST, limit=1)
    return shops[0] if shops else None
