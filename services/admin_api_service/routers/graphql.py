"""GraphQL endpoint emulating the platform's Admin API."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from libs.common.logging import get_logger
from services.admin_api_service.dependencies import get_dispatch_context
from services.admin_api_service.dispatcher import DispatchContext, execute_operation
from services.admin_api_service.errors import MissingQueryError
from services.admin_api_service.schemas import GraphQLRequest
from services.admin_api_service.tenancy import extract_credential

router = APIRouter(tags=["graphql"])
logger = get_logger(__name__)


@router.post("/graphql.json")
@router.post("/admin/api/{api_version}/graphql.json")
async def graphql(
    payload: GraphQLRequest,
    request: Request,
    context: DispatchContext = Depends(get_dispatch_context),
):
    """
    Execute a supported query or mutation.

    Queries: orders(first), order(id), productVariants(first).
    Mutations: fulfillmentCreate, inventorySetQuantities.
    """
    credential = extract_credential(
        request.headers, context.settings.ACCESS_TOKEN_HEADER
    )
    try:
        return await execute_operation(
            context, payload.query, payload.variables, credential
        )
    except MissingQueryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
