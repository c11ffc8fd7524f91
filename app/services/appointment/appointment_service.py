# ============================================================================
# app/services/appointment/appointment_service.py
# Booking, conflict detection and status changes - no FastAPI dependencies
# ============================================================================
"""Service for managing appointments"""
from uuid import UUID, uuid4

from app.config.settings import settings
from app.core.exceptions import AppointmentConflictError, NotFoundError, PersistenceError
from app.models.appointment import Appointment
from app.schemas.appointment import AppointmentCreate, AppointmentStatus, REQUIRED_APPOINTMENT_FIELDS
from app.services.catalog.catalog_service import CatalogService
from app.services.scheduling.time_slot_service import (
    conflict_message,
    find_conflict,
    generate_time_slots,
    parse_time_string,
)
from app.tasks import email_tasks
from app.utils.payload import require_fields, validate_payload
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

logger = logging.getLogger(__name__)


class AppointmentService:
    """Handles appointment operations"""

    @staticmethod
    def create_appointment(db: Session, data: Dict[str, Any]) -> Appointment:
        """
        Book an appointment from a raw form payload.

        Steps: required-field check, field validation, conflict check against
        the same day's active bookings, insert, then a best-effort confirmation
        email. The conflict query and the insert are separate statements, so two
        simultaneous bookings for one slot can both pass the check.

        Raises:
            MissingFieldsError: required fields absent or empty
            InvalidPayloadError: fields present but malformed
            AppointmentConflictError: slot overlaps an existing booking
            PersistenceError: the store failed
        """
        require_fields(data, REQUIRED_APPOINTMENT_FIELDS)
        payload = validate_payload(AppointmentCreate, data)

        conflict = AppointmentService.check_for_conflicts(
            db, payload.date, payload.time, payload.duration
        )
        if conflict:
            message = conflict_message(conflict)
            logger.info(f"Appointment conflict detected on {payload.date}: {message}")
            raise AppointmentConflictError(message, conflict.to_dict())

        price = payload.price
        if price is None:
            price = CatalogService.get_package(payload.vehicle_type, payload.service_package)["price"]

        appointment = Appointment(
            id=uuid4(),
            name=payload.name,
            email=str(payload.email),
            phone=payload.phone,
            vehicle_type=payload.vehicle_type,
            vehicle_model=payload.vehicle_model,
            service_package=payload.service_package,
            date=payload.date,
            time=payload.time,
            duration=payload.duration,
            price=price,
            status=payload.status or AppointmentStatus.SCHEDULED.value,
            created_at=payload.created_at or datetime.now(timezone.utc),
        )

        try:
            db.add(appointment)
            db.commit()
            db.refresh(appointment)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error inserting appointment: {e}", exc_info=True)
            raise PersistenceError(e)

        logger.info(f"Appointment created with ID: {appointment.id} ({appointment.date} {appointment.time})")

        AppointmentService._queue_confirmation_email(appointment)
        return appointment

    @staticmethod
    def get_active_bookings(db: Session, date: str) -> List[Appointment]:
        """Non-cancelled appointments on a date whose start time can be parsed"""
        try:
            appointments = db.query(Appointment).filter(
                Appointment.date == date,
                Appointment.status != AppointmentStatus.CANCELLED.value
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Error loading bookings for {date}: {e}")
            raise PersistenceError(e)

        bookings = []
        for appointment in appointments:
            try:
                parse_time_string(appointment.time)
            except ValueError:
                logger.warning(
                    f"Skipping appointment {appointment.id} with unparseable time {appointment.time!r}"
                )
                continue
            bookings.append(appointment)

        return bookings

    @staticmethod
    def check_for_conflicts(
            db: Session,
            date: str,
            time: str,
            duration: int
    ) -> Optional[Appointment]:
        """Return the first active booking on `date` that overlaps the requested slot"""
        return find_conflict(time, duration, AppointmentService.get_active_bookings(db, date))

    @staticmethod
    def get_availability(db: Session, date: str, duration: int) -> Dict[str, Any]:
        """Mark each bookable start time of the day as free or taken"""
        bookings = AppointmentService.get_active_bookings(db, date)

        slots = [
            {"time": slot, "available": find_conflict(slot, duration, bookings) is None}
            for slot in generate_time_slots(
                settings.BOOKING_OPEN_HOUR,
                settings.BOOKING_CLOSE_HOUR,
                settings.BOOKING_SLOT_INTERVAL_MINUTES,
            )
        ]

        return {"date": date, "duration": duration, "slots": slots}

    @staticmethod
    def update_status(db: Session, appointment_id: str, status: str) -> Appointment:
        """
        Set a new status on an appointment.

        Raises:
            NotFoundError: unknown or malformed id
            PersistenceError: the store failed
        """
        try:
            key = UUID(str(appointment_id))
        except ValueError:
            raise NotFoundError("Appointment not found")

        try:
            appointment = db.query(Appointment).filter(Appointment.id == key).first()
            if not appointment:
                raise NotFoundError("Appointment not found")

            appointment.status = status
            appointment.updated_at = datetime.now(timezone.utc)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating appointment {appointment_id}: {e}")
            raise PersistenceError(e, error="Failed to update appointment")

        logger.info(f"Appointment {appointment_id} status set to {status}")
        return appointment

    @staticmethod
    def _queue_confirmation_email(appointment: Appointment) -> None:
        """Hand the confirmation to the worker; never fails the booking"""
        if not settings.EMAIL_NOTIFICATIONS_ENABLED or not appointment.email:
            return

        try:
            email_tasks.send_appointment_confirmation_email.apply_async(
                args=[appointment.to_dict()],
                retry=False,
            )
        except Exception as e:
            logger.error(f"Error queueing confirmation email for appointment {appointment.id}: {e}")
