"""
Order routes — persisted order state, edits, workflow and checkout.

Provides:
- POST   /orders/checkout                   – check out an order sent in full
- PUT    /orders/{session_id}               – store an order
- GET    /orders/{session_id}               – stored order with a fresh quote
- DELETE /orders/{session_id}               – discard a stored order
- POST   /orders/{session_id}/signs         – add a sign
- PATCH  /orders/{session_id}/signs/{id}    – resize / toggle / change options
- DELETE /orders/{session_id}/signs/{id}    – remove a sign
- PUT    /orders/{session_id}/delivery      – postal code, shipping, installation
- POST   /orders/{session_id}/status        – move through the workflow
- POST   /orders/{session_id}/checkout      – submit the stored order
Version: 1.0.0
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.container import get_order_service, get_order_store
from app.core.exceptions import (
    CheckoutNotAllowedError,
    DesignNotFoundError,
    InvalidStateTransitionError,
    NonRetryableError,
    OrderNotFoundError,
    ValidationError,
)
from app.db.order_store import OrderStore
from app.schemas.orders import (
    AddSignRequest,
    CheckoutResponse,
    DeliveryUpdateRequest,
    OrderConfiguration,
    SignUpdateRequest,
    StatusChangeRequest,
    StoredOrderResponse,
)
from app.schemas.pricing import SignOptions
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def _http_error(e: NonRetryableError) -> HTTPException:
    if isinstance(e, (OrderNotFoundError, DesignNotFoundError)):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, CheckoutNotAllowedError):
        return HTTPException(status_code=409, detail={"message": str(e), "reasons": e.reasons})
    if isinstance(e, InvalidStateTransitionError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, ValidationError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


async def _stored_response(
    session_id: str, order: OrderConfiguration, orders: OrderService,
) -> StoredOrderResponse:
    try:
        quote = await orders.quote_order(order)
    except NonRetryableError as e:
        raise _http_error(e)
    return StoredOrderResponse(session_id=session_id, order=order, quote=quote)


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout_order(
    body: OrderConfiguration,
    orders: OrderService = Depends(get_order_service),
):
    """Hand a confirmed order over to payment."""
    try:
        submitted, payload = await orders.submit(body)
    except NonRetryableError as e:
        raise _http_error(e)
    return CheckoutResponse(order=submitted, checkout=payload)


@router.put("/{session_id}", response_model=StoredOrderResponse)
async def save_order(
    session_id: str,
    body: OrderConfiguration,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    """Designs are stored as the catalog has them, whatever the body carried."""
    try:
        order = orders.with_catalog_designs(body)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, order)
    return await _stored_response(session_id, order, orders)


@router.get("/{session_id}", response_model=StoredOrderResponse)
async def get_order(
    session_id: str,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    try:
        order = await store.load(session_id)
    except OrderNotFoundError as e:
        raise _http_error(e)
    return await _stored_response(session_id, order, orders)


@router.delete("/{session_id}", status_code=204)
async def delete_order(session_id: str, store: OrderStore = Depends(get_order_store)):
    deleted = await store.delete(session_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"No order stored for session '{session_id}'")
    return Response(status_code=204)


@router.post("/{session_id}/signs", response_model=StoredOrderResponse)
async def add_sign(
    session_id: str,
    body: AddSignRequest,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    """Start a new order for the session when none is stored yet."""
    try:
        order = await store.load(session_id)
    except OrderNotFoundError:
        order = OrderConfiguration()

    options = SignOptions(**body.model_dump(include=set(SignOptions.model_fields)))
    try:
        updated = orders.add_sign(order, body.design_id, body.width, options)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, updated)
    return await _stored_response(session_id, updated, orders)


@router.patch("/{session_id}/signs/{sign_id}", response_model=StoredOrderResponse)
async def update_sign(
    session_id: str,
    sign_id: str,
    body: SignUpdateRequest,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    try:
        updated = await store.load(session_id)
        if body.width is not None:
            updated = orders.resize_sign(updated, sign_id, body.width)
        if body.options is not None:
            updated = orders.update_sign_options(updated, sign_id, body.options)
        if body.is_enabled is not None:
            current = next((sign for sign in updated.signs if sign.id == sign_id), None)
            if current is None or current.is_enabled != body.is_enabled:
                updated = orders.toggle_sign(updated, sign_id)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, updated)
    return await _stored_response(session_id, updated, orders)


@router.delete("/{session_id}/signs/{sign_id}", response_model=StoredOrderResponse)
async def remove_sign(
    session_id: str,
    sign_id: str,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    try:
        order = await store.load(session_id)
        updated = orders.remove_sign(order, sign_id)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, updated)
    return await _stored_response(session_id, updated, orders)


@router.put("/{session_id}/delivery", response_model=StoredOrderResponse)
async def update_delivery(
    session_id: str,
    body: DeliveryUpdateRequest,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    """Installation is applied last, so it wins over a shipping option sent alongside."""
    try:
        updated = await store.load(session_id)
        if body.postal_code is not None:
            updated = orders.set_postal_code(updated, body.postal_code)
        if body.shipping_selection is not None:
            updated = orders.select_shipping(updated, body.shipping_selection)
        if body.includes_installation is not None:
            updated = orders.set_installation(updated, body.includes_installation)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, updated)
    return await _stored_response(session_id, updated, orders)


@router.post("/{session_id}/status", response_model=StoredOrderResponse)
async def change_status(
    session_id: str,
    body: StatusChangeRequest,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    try:
        order = await store.load(session_id)
        updated = orders.transition(order, body.status)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, updated)
    return await _stored_response(session_id, updated, orders)


@router.post("/{session_id}/checkout", response_model=CheckoutResponse)
async def checkout_stored_order(
    session_id: str,
    orders: OrderService = Depends(get_order_service),
    store: OrderStore = Depends(get_order_store),
):
    try:
        order = await store.load(session_id)
        submitted, payload = await orders.submit(order)
    except NonRetryableError as e:
        raise _http_error(e)

    await store.save(session_id, submitted)
    logger.info("stored order checked out session=%s total=%s", session_id, payload.total)
    return CheckoutResponse(order=submitted, checkout=payload)
