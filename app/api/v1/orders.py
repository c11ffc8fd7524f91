# ============================================================================
# FILE: app/api/v1/orders.py
# Checkout submission and cart quote (public), order management (admin)
# ============================================================================
from fastapi import APIRouter, Depends, Query, Path, Request
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.api.dependencies import get_current_admin
from app.config.database import get_db
from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.schemas.common import StatusUpdateResponse, SubmissionResponse
from app.schemas.order import CartQuoteRequest, CartQuoteResponse
from app.services.order.order_service import OrderService
from app.utils.payload import parse_json_object

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=SubmissionResponse)
async def create_order(request: Request, db: Session = Depends(get_db)):
    """
    Place a coconut-oil order from the checkout form (camelCase JSON).
    """
    data = parse_json_object(await request.body())
    order = OrderService.create_order(db, data)

    return SubmissionResponse(
        id=str(order.id),
        message="Order created successfully"
    )


@router.post("/quote", response_model=CartQuoteResponse, response_model_by_alias=True)
async def quote_cart(body: CartQuoteRequest):
    """
    Price a cart against the catalog: line totals, subtotal, delivery charge
    and total.
    """
    return OrderService.quote_cart([item.model_dump() for item in body.items])


@router.get("", response_model=List[dict])
async def list_orders(
        status: Optional[str] = Query(None, description="Filter by status (Processing, Shipped, Delivered)"),
        skip: int = Query(0, ge=0, description="Number of records to skip"),
        limit: Optional[int] = Query(None, ge=1, le=500, description="Number of records to return"),
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    All orders, newest first.
    Requires admin token.
    """
    return OrderService.list_orders(db=db, status=status, skip=skip, limit=limit)


@router.put("", response_model=StatusUpdateResponse)
async def update_order_status(
        request: Request,
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    Change an order's status. Body: {"id": ..., "status": ...}.
    Requires admin token.
    """
    data = parse_json_object(await request.body())
    order_id = data.get("id")
    status = data.get("status")

    if not order_id or not status or not isinstance(status, str):
        raise InvalidPayloadError("ID and status are required")

    OrderService.update_status(db, str(order_id), status)
    logger.info(f"Admin {admin} set order {order_id} to {status}")

    return StatusUpdateResponse(message="Order updated successfully")


@router.get("/{order_id}")
async def get_order(
        order_id: str = Path(..., description="The order ID"),
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    Get a single order.
    Requires admin token.
    """
    result = OrderService.get_order_by_id(db, order_id)

    if not result:
        raise NotFoundError("Order not found")

    return result
