# app/schemas/appointment.py
"""Pydantic schemas for vehicle-wash appointment submissions"""
from datetime import date as date_type, datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from app.schemas.common import CamelModel
from app.services.catalog.catalog_service import CatalogService
from app.services.scheduling.time_slot_service import format_time, parse_time_string

VehicleType = Literal["bike", "car", "bus", "lorry"]

REQUIRED_APPOINTMENT_FIELDS = (
    "name",
    "email",
    "phone",
    "vehicleType",
    "vehicleModel",
    "servicePackage",
    "date",
    "time",
    "duration",
)


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class AppointmentCreate(CamelModel):
    """Booking form payload"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=5, max_length=30)
    vehicle_type: VehicleType
    vehicle_model: str = Field(..., min_length=1, max_length=200)
    service_package: str = Field(..., description="basic, premium or deluxe")
    date: str = Field(..., description="Calendar date (YYYY-MM-DD)")
    time: str = Field(..., description="Start time (h:mm AM/PM)")
    duration: int = Field(..., gt=0, le=24 * 60, description="Duration in minutes")
    price: Optional[float] = Field(None, ge=0)
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        try:
            return date_type.fromisoformat(v.strip()).isoformat()
        except ValueError:
            raise ValueError("Date must be in YYYY-MM-DD format")

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        try:
            hour, minute = parse_time_string(v)
        except ValueError:
            raise ValueError("Time must be in h:mm AM/PM format")
        return format_time(hour * 60 + minute)

    @model_validator(mode="after")
    def validate_package(self):
        if not CatalogService.is_valid_package(self.vehicle_type, self.service_package):
            raise ValueError(
                f"Invalid package type: {self.service_package} for category: {self.vehicle_type}"
            )
        return self


class TimeSlotAvailability(BaseModel):
    time: str
    available: bool


class AvailabilityResponse(BaseModel):
    """Bookable slots for one day"""
    date: str
    duration: int
    slots: List[TimeSlotAvailability] = Field(default_factory=list)
