# ============================================================================
# FILE: app/api/v1/appointments.py
# Booking form submission (public) and appointment management (admin)
# IMPORTANT: Specific routes MUST come before parameterized routes
# ============================================================================
from fastapi import APIRouter, Depends, Query, Path, Request
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
import logging

from app.api.dependencies import get_current_admin
from app.config.database import get_db
from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.schemas.appointment import AvailabilityResponse, VehicleType
from app.schemas.common import StatusUpdateResponse, SubmissionResponse
from app.services.appointment.appointment_service import AppointmentService
from app.services.appointment.appointment_query_service import AppointmentQueryService
from app.services.catalog.catalog_service import CatalogService
from app.utils.payload import parse_json_object

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=SubmissionResponse)
async def create_appointment(request: Request, db: Session = Depends(get_db)):
    """
    Book a vehicle wash.

    The body is the raw booking form as JSON (camelCase keys). Returns 409 with
    the clashing booking when the slot overlaps an active appointment that day.
    """
    data = parse_json_object(await request.body())
    appointment = AppointmentService.create_appointment(db, data)

    return SubmissionResponse(
        id=str(appointment.id),
        message="Appointment created successfully"
    )


@router.get("/availability", response_model=AvailabilityResponse)
async def get_availability(
        on_date: date = Query(..., alias="date", description="Day to check (YYYY-MM-DD)"),
        duration: Optional[int] = Query(None, gt=0, le=24 * 60, description="Wash duration in minutes"),
        vehicle_type: Optional[VehicleType] = Query(None, alias="vehicleType"),
        service_package: Optional[str] = Query(None, alias="servicePackage"),
        db: Session = Depends(get_db)
):
    """
    Every bookable start time of the day with an availability flag.

    Pass either `duration` or `vehicleType` + `servicePackage`; the package
    duration comes from the catalog.
    """
    if duration is None:
        if not (vehicle_type and service_package):
            raise InvalidPayloadError("Either duration or vehicleType and servicePackage are required")
        try:
            duration = CatalogService.get_package(vehicle_type, service_package)["duration"]
        except ValueError as e:
            raise InvalidPayloadError("Invalid field values", details=[
                {"field": "servicePackage", "message": str(e)}
            ])

    return AppointmentService.get_availability(db, on_date.isoformat(), duration)


@router.get("", response_model=List[dict])
async def list_appointments(
        status: Optional[str] = Query(None, description="Filter by status (Scheduled, Completed, Cancelled)"),
        on_date: Optional[date] = Query(None, alias="date", description="Filter by appointment date"),
        skip: int = Query(0, ge=0, description="Number of records to skip"),
        limit: Optional[int] = Query(None, ge=1, le=500, description="Number of records to return"),
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    All appointments, newest first.
    Requires admin token.
    """
    return AppointmentQueryService.list_appointments(
        db=db,
        status=status,
        on_date=on_date,
        skip=skip,
        limit=limit
    )


@router.put("", response_model=StatusUpdateResponse)
async def update_appointment_status(
        request: Request,
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    Change an appointment's status. Body: {"id": ..., "status": ...}.
    Requires admin token.
    """
    data = parse_json_object(await request.body())
    appointment_id = data.get("id")
    status = data.get("status")

    if not appointment_id or not status or not isinstance(status, str):
        raise InvalidPayloadError("ID and status are required")

    AppointmentService.update_status(db, str(appointment_id), status)
    logger.info(f"Admin {admin} set appointment {appointment_id} to {status}")

    return StatusUpdateResponse(message="Appointment updated successfully")


@router.get("/{appointment_id}")
async def get_appointment(
        appointment_id: str = Path(..., description="The appointment ID"),
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    Get a single appointment.
    Requires admin token.
    """
    result = AppointmentQueryService.get_appointment_by_id(db, appointment_id)

    if not result:
        raise NotFoundError("Appointment not found")

    return result
