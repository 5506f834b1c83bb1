"""Simulation endpoints: bulk random orders, full-flow kickoff, status summary, backend sync."""

from collections import Counter

import httpx
from fastapi import APIRouter, Depends
from libs.common.config import Settings, get_settings
from libs.common.logging import get_logger
from services.admin_api_service.dependencies import get_backend_client, get_store
from services.admin_api_service.errors import AdminApiError
from services.admin_api_service.models import Order
from services.admin_api_service.schemas import (
    BackendSyncRequest,
    BackendSyncResponse,
    CreateOrdersRequest,
    CreateOrdersResponse,
    FlowStep,
    FullFlowRequest,
    FullFlowResponse,
    RecentOrderSummary,
    SimulatedOrderSummary,
    SimulationStatusResponse,
)
from services.admin_api_service.simulation import create_random_order
from services.admin_api_service.store import SqlAlchemyStore

router = APIRouter(prefix="/simulation", tags=["simulation"])
logger = get_logger(__name__)

SYNC_HINT = "The backend also syncs orders on its own schedule"


async def _create_orders(store: SqlAlchemyStore, count: int) -> list[SimulatedOrderSummary]:
    """Create ``count`` random orders. Individual failures are logged and skipped."""
    created = []
    for index in range(count):
        try:
            order = await create_random_order(store)
        except AdminApiError as exc:
            logger.error("Failed to create order %s: %s", index + 1, exc.message)
            continue
        created.append(SimulatedOrderSummary.model_validate(order))
        logger.info("Created order %s/%s: %s", index + 1, count, order.external_id)
    return created


@router.post("/create-orders", response_model=CreateOrdersResponse, status_code=201)
async def create_orders(
    body: CreateOrdersRequest = CreateOrdersRequest(),
    store: SqlAlchemyStore = Depends(get_store),
):
    created = await _create_orders(store, body.count)
    return CreateOrdersResponse(orders_created=len(created), orders=created)


@router.post("/full-flow", response_model=FullFlowResponse, status_code=201)
async def full_flow(
    body: FullFlowRequest = FullFlowRequest(),
    store: SqlAlchemyStore = Depends(get_store),
):
    """Create orders, then describe the downstream steps that pick them up."""
    created = await _create_orders(store, body.order_count)
    return FullFlowResponse(
        message="Full flow simulation initiated",
        orders_created=len(created),
        orders=created,
        flow={
            "step1": FlowStep(
                status="completed",
                description=f"{len(created)} orders created in the admin API mock",
            ),
            "step2": FlowStep(
                status="pending",
                description="Backend pulls unshipped orders on its sync schedule",
                endpoint="POST /simulation/trigger-backend-sync (manual)",
            ),
            "step3": FlowStep(
                status="pending",
                description="Backend pushes the orders to the warehouse",
            ),
            "step4": FlowStep(
                status="pending",
                description="Warehouse picks and ships the orders",
            ),
            "step5": FlowStep(
                status="pending",
                description="Backend reports shipments back through fulfillmentCreate",
                endpoint="POST /graphql.json",
            ),
        },
        monitoring={
            "orders": "GET /admin/orders",
            "simulationStatus": "GET /simulation/status",
        },
    )


@router.get("/status", response_model=SimulationStatusResponse)
async def simulation_status(store: SqlAlchemyStore = Depends(get_store)):
    """Order counts per fulfillment status and the five most recent orders."""
    orders = await store.find(Order, order=[("created_at", "asc"), ("id", "asc")])
    by_status = Counter(
        getattr(order.fulfillment_status, "value", order.fulfillment_status) or "unknown"
        for order in orders
    )
    return SimulationStatusResponse(
        total_orders=len(orders),
        by_status=dict(by_status),
        recent_orders=[RecentOrderSummary.model_validate(o) for o in orders[-5:]],
    )


@router.post("/trigger-backend-sync", response_model=BackendSyncResponse)
async def trigger_backend_sync(
    body: BackendSyncRequest = BackendSyncRequest(),
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_backend_client),
):
    """Ask the downstream backend to pull orders now."""
    backend_url = (body.backend_url or settings.BACKEND_URL).rstrip("/")
    try:
        response = await http_client.post(
            f"{backend_url}/api/orders/sync",
            json={},
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Backend sync to %s failed: %s", backend_url, exc)
        return BackendSyncResponse(
            success=False,
            message=f"Could not trigger backend sync: {exc}",
            hint=SYNC_HINT,
        )

    try:
        payload = response.json()
    except ValueError:
        payload = response.text
    return BackendSyncResponse(
        success=True, message="Backend sync triggered", response=payload
    )
