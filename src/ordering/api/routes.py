"""FastAPI routes for the Ordering domain: placing and reading orders."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from identity.session import get_session_provider
from identity.session.port import UserSession
from ordering.api.schemas import FailureResponse, OrderIdResponse, RedirectResponseBody
from ordering.order.creation import create_order
from ordering.order.queries import get_my_orders, get_order_by_id
from ordering.projections.order_detail import OrderDetail, OrderPage
from shared.navigation import Failure, Redirect, Success


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
def get_current_session(request: Request) -> UserSession | None:
    return get_session_provider().current_session(request)


def _failure_response(outcome: Failure) -> JSONResponse:
    return JSONResponse(status_code=400, content=outcome.to_dict())


# ---------------------------------------------------------------------------
# Order Router (browser flow: redirects)
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post(
    "",
    status_code=303,
    responses={400: {"model": FailureResponse}},
)
async def place_order(session: UserSession | None = Depends(get_current_session)):
    """Place an order from the caller's cart and send the browser where it belongs next."""
    outcome = create_order(session)
    if isinstance(outcome, Redirect):
        return RedirectResponse(url=outcome.path, status_code=303)
    return _failure_response(outcome)


@order_router.get("/mine", response_model=OrderPage)
async def my_orders(
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    session: UserSession | None = Depends(get_current_session),
) -> OrderPage:
    return get_my_orders(session, page=page, limit=limit)


@order_router.get("/{order_id}", response_model=OrderDetail)
async def order_detail(order_id: str) -> OrderDetail:
    order = get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


# ---------------------------------------------------------------------------
# JSON API Router
# ---------------------------------------------------------------------------
api_order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@api_order_router.post(
    "",
    status_code=201,
    response_model=OrderIdResponse,
    responses={400: {"model": FailureResponse}, 409: {"model": RedirectResponseBody}},
)
async def create_order_json(session: UserSession | None = Depends(get_current_session)):
    """Place an order; unmet checkout preconditions come back as 409 with the view to visit."""
    outcome = create_order(session, redirect_on_success=False)
    if isinstance(outcome, Success):
        return OrderIdResponse(order_id=outcome.value)
    if isinstance(outcome, Redirect):
        return JSONResponse(status_code=409, content={"redirect": outcome.path})
    return _failure_response(outcome)
