# app/models/order.py
"""
Order Model - one coconut-oil order per row.
Line items stay embedded as a JSON list so the order reads back as a single document.
"""
from sqlalchemy import Column, String, Numeric, DateTime, JSON, Text, Uuid
from sqlalchemy.sql import func
import uuid
from app.models.base import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Contact
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(30), nullable=False)

    # Delivery address
    address = Column(Text, nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    pincode = Column(String(12), nullable=False)

    # [{"id", "name", "size", "price", "quantity"}, ...]
    items = Column(JSON, nullable=False, default=list)

    subtotal = Column(Numeric(10, 2), nullable=False)
    delivery_charge = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(String(20), nullable=False, default="cod")  # cod, gpay

    status = Column(String(30), nullable=False, default="Processing")  # Processing, Shipped, Delivered

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Order(id={self.id}, total={self.total}, status={self.status})>"

    def to_dict(self):
        """Convert to dictionary for API responses"""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "items": self.items or [],
            "subtotal": float(self.subtotal),
            "deliveryCharge": float(self.delivery_charge),
            "total": float(self.total),
            "paymentMethod": self.payment_method,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    @property
    def item_count(self) -> int:
        """Total units across all line items"""
        return sum(int(item.get("quantity", 0)) for item in (self.items or []))
