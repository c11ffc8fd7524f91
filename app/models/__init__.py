# app/models/__init__.py
from .base import Base
from .appointment import Appointment
from .order import Order

__all__ = [
    "Base",
    "Appointment",
    "Order",
]
