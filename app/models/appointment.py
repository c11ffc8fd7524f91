# ===== app/models/appointment.py =====
from sqlalchemy import Column, String, Integer, Numeric, DateTime, Uuid
from sqlalchemy.sql import func
from .base import Base
import uuid


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Customer info
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(30), nullable=False)

    # Vehicle and package
    vehicle_type = Column(String(20), nullable=False)  # bike, car, bus, lorry
    vehicle_model = Column(String(200), nullable=False)
    service_package = Column(String(20), nullable=False)  # basic, premium, deluxe

    # Slot: calendar date and 12-hour clock time kept as submitted
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    time = Column(String(8), nullable=False)  # h:mm AM/PM
    duration = Column(Integer, nullable=False)  # minutes
    price = Column(Numeric(10, 2), nullable=True)

    # Status tracking
    status = Column(String(30), nullable=False, default="Scheduled")  # Scheduled, Completed, Cancelled

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Appointment(id={self.id}, date={self.date}, time={self.time})>"

    def to_dict(self):
        """Convert to dictionary for API responses"""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "vehicleType": self.vehicle_type,
            "vehicleModel": self.vehicle_model,
            "servicePackage": self.service_package,
            "date": self.date,
            "time": self.time,
            "duration": self.duration,
            "price": float(self.price) if self.price is not None else None,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
