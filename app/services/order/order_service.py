# app/services/order/order_service.py
"""Service for coconut-oil orders"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4
import logging

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import InvalidPayloadError, NotFoundError, PersistenceError
from app.models.order import Order
from app.schemas.order import OrderCreate, OrderStatus, REQUIRED_ORDER_FIELDS
from app.services.catalog.catalog_service import CatalogService
from app.tasks import email_tasks
from app.utils.payload import require_fields, validate_payload

logger = logging.getLogger(__name__)


class OrderService:
    """Handles order creation, listing and status changes"""

    @staticmethod
    def create_order(db: Session, data: Dict[str, Any]) -> Order:
        """
        Place an order from a raw checkout payload.

        Missing subtotal and delivery charge are derived from the line items and
        the flat delivery charge. The client's total is stored as sent.

        Raises:
            MissingFieldsError: required fields absent or empty
            InvalidPayloadError: fields present but malformed
            PersistenceError: the store failed
        """
        require_fields(data, REQUIRED_ORDER_FIELDS)
        payload = validate_payload(OrderCreate, data)

        items = [item.model_dump() for item in payload.items]
        computed = CatalogService.quote(items, payload.delivery_charge)
        subtotal = payload.subtotal if payload.subtotal is not None else computed["subtotal"]
        delivery_charge = computed["deliveryCharge"]

        if abs(subtotal + delivery_charge - payload.total) > 0.005:
            logger.warning(
                f"Order total {payload.total} differs from subtotal {subtotal} + delivery {delivery_charge}"
            )

        order = Order(
            id=uuid4(),
            name=payload.name,
            email=str(payload.email),
            phone=payload.phone,
            address=payload.address,
            city=payload.city,
            state=payload.state,
            pincode=payload.pincode,
            items=items,
            subtotal=subtotal,
            delivery_charge=delivery_charge,
            total=payload.total,
            payment_method=payload.payment_method,
            status=payload.status or OrderStatus.PROCESSING.value,
            created_at=payload.created_at or datetime.now(timezone.utc),
        )

        try:
            db.add(order)
            db.commit()
            db.refresh(order)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error inserting order: {e}", exc_info=True)
            raise PersistenceError(e)

        logger.info(f"Order created with ID: {order.id} (total {order.total})")

        OrderService._queue_confirmation_email(order)
        return order

    @staticmethod
    def quote_cart(cart_items: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Price a cart of {id, quantity} entries against the product catalog.

        Raises:
            InvalidPayloadError: a product id is not in the catalog
        """
        lines = []
        for cart_item in cart_items:
            product = CatalogService.get_product(cart_item["id"])
            if product is None:
                raise InvalidPayloadError("Unknown product", details=cart_item["id"])

            quantity = int(cart_item["quantity"])
            lines.append({
                "id": product["id"],
                "name": product["name"],
                "size": product["size"],
                "price": float(product["price"]),
                "quantity": quantity,
                "line_total": float(product["price"]) * quantity,
            })

        totals = CatalogService.quote(lines)
        return {
            "items": lines,
            "subtotal": totals["subtotal"],
            "delivery_charge": totals["deliveryCharge"],
            "total": totals["total"],
        }

    @staticmethod
    def list_orders(
            db: Session,
            status: Optional[str] = None,
            skip: int = 0,
            limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Orders newest first, optionally filtered by status."""
        query = db.query(Order)
        if status:
            query = query.filter(Order.status == status)

        query = query.order_by(desc(Order.created_at)).offset(skip)
        if limit:
            query = query.limit(limit)

        try:
            orders = query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching orders: {e}")
            raise PersistenceError(e, error="Failed to fetch orders")

        logger.info(f"Found {len(orders)} orders")
        return [order.to_dict() for order in orders]

    @staticmethod
    def get_order_by_id(db: Session, order_id: str) -> Optional[Dict[str, Any]]:
        try:
            key = UUID(str(order_id))
        except ValueError:
            return None

        order = db.query(Order).filter(Order.id == key).first()
        return order.to_dict() if order else None

    @staticmethod
    def update_status(db: Session, order_id: str, status: str) -> Order:
        """
        Set a new status on an order.

        Raises:
            NotFoundError: unknown or malformed id
            PersistenceError: the store failed
        """
        try:
            key = UUID(str(order_id))
        except ValueError:
            raise NotFoundError("Order not found")

        try:
            order = db.query(Order).filter(Order.id == key).first()
            if not order:
                raise NotFoundError("Order not found")

            order.status = status
            order.updated_at = datetime.now(timezone.utc)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating order {order_id}: {e}")
            raise PersistenceError(e, error="Failed to update order")

        logger.info(f"Order {order_id} status set to {status}")
        return order

    @staticmethod
    def get_order_stats(db: Session) -> Dict[str, Any]:
        """Counts by status, revenue and units sold."""
        orders = db.query(Order).all()

        by_status: Dict[str, int] = {}
        for order in orders:
            status = order.status or "unknown"
            by_status[status] = by_status.get(status, 0) + 1

        return {
            "total_orders": len(orders),
            "by_status": by_status,
            "order_revenue": round(sum(float(order.total) for order in orders), 2),
            "units_sold": sum(order.item_count for order in orders),
            "delivery_charge": float(settings.DELIVERY_CHARGE),
        }

    @staticmethod
    def _queue_confirmation_email(order: Order) -> None:
        """Hand the confirmation to the worker; never fails the order"""
        if not settings.EMAIL_NOTIFICATIONS_ENABLED or not order.email:
            return

        try:
            email_tasks.send_order_confirmation_email.apply_async(
                args=[order.to_dict()],
                retry=False,
            )
        except Exception as e:
            logger.error(f"Error queueing confirmation email for order {order.id}: {e}")
