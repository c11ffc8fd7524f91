# app/schemas/__init__.py
from .common import (
    CamelModel,
    SubmissionResponse,
    StatusUpdateResponse
)

from .appointment import (
    AppointmentStatus,
    AppointmentCreate,
    TimeSlotAvailability,
    AvailabilityResponse,
    REQUIRED_APPOINTMENT_FIELDS
)

from .order import (
    OrderStatus,
    OrderItem,
    OrderCreate,
    CartItem,
    CartQuoteRequest,
    QuotedItem,
    CartQuoteResponse,
    REQUIRED_ORDER_FIELDS
)

from .admin import (
    LoginRequest,
    TokenResponse
)
