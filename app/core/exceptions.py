# app/core/exceptions.py
"""
Domain errors raised by the service layer.

Services stay free of FastAPI; the application factory maps these to JSON
responses in one place.
"""
from typing import Any, Dict, List, Optional


class APIError(Exception):
    """Base class for errors that carry their own HTTP status and JSON body"""

    status_code = 500

    def __init__(self, error: str, **extra: Any):
        super().__init__(error)
        self.error = error
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, **self.extra}


class InvalidPayloadError(APIError):
    """Unparseable body or field values of the wrong type/format"""

    status_code = 400


class MissingFieldsError(APIError):
    status_code = 400

    def __init__(self, missing_fields: List[str]):
        super().__init__("Missing required fields", missingFields=list(missing_fields))
        self.missing_fields = list(missing_fields)


class NotFoundError(APIError):
    status_code = 404


class AppointmentConflictError(APIError):
    status_code = 409

    def __init__(self, message: str, existing_appointment: Optional[Dict[str, Any]] = None):
        super().__init__(
            "Appointment conflict",
            success=False,
            message=message,
            existingAppointment=existing_appointment,
        )
        self.message = message


class PersistenceError(APIError):
    """The store rejected or failed a read/write"""

    status_code = 500

    def __init__(self, cause: Exception, error: str = "Database error"):
        super().__init__(error, success=False, details=str(cause))

