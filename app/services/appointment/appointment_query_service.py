# ============================================================================
# FILE 1: app/services/appointment/appointment_query_service.py
# Read-only queries behind the admin listing and dashboard
# ============================================================================
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import desc
from datetime import date
from typing import Optional, Dict, Any, List
from uuid import UUID
import logging

from app.core.exceptions import PersistenceError
from app.models.appointment import Appointment
from app.schemas.appointment import AppointmentStatus
from app.services.scheduling.time_slot_service import to_minutes

logger = logging.getLogger(__name__)


class AppointmentQueryService:
    """Service layer for appointment listings and statistics."""

    @staticmethod
    def list_appointments(
            db: Session,
            status: Optional[str] = None,
            on_date: Optional[date] = None,
            skip: int = 0,
            limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Appointments newest first, optionally filtered by status and date."""
        query = db.query(Appointment)

        if status:
            query = query.filter(Appointment.status == status)
        if on_date:
            query = query.filter(Appointment.date == on_date.isoformat())

        query = query.order_by(desc(Appointment.created_at)).offset(skip)
        if limit:
            query = query.limit(limit)

        try:
            appointments = query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching appointments: {e}")
            raise PersistenceError(e, error="Failed to fetch appointments")

        logger.info(f"Found {len(appointments)} appointments")
        return [appt.to_dict() for appt in appointments]

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: str) -> Optional[Dict[str, Any]]:
        """Get a single appointment by ID. Returns None if not found."""
        try:
            key = UUID(str(appointment_id))
        except ValueError:
            return None

        appointment = db.query(Appointment).filter(Appointment.id == key).first()
        return appointment.to_dict() if appointment else None

    @staticmethod
    def get_day_schedule(db: Session, on_date: date) -> List[Dict[str, Any]]:
        """Non-cancelled appointments for one day in start-time order."""
        appointments = db.query(Appointment).filter(
            Appointment.date == on_date.isoformat(),
            Appointment.status != AppointmentStatus.CANCELLED.value
        ).all()

        def start_minute(appt: Appointment) -> int:
            try:
                return to_minutes(appt.time)
            except ValueError:
                return 0

        return [appt.to_dict() for appt in sorted(appointments, key=start_minute)]

    @staticmethod
    def get_appointment_stats(db: Session) -> Dict[str, Any]:
        """Counts by status, by vehicle type and booked revenue."""
        appointments = db.query(Appointment).all()

        by_status: Dict[str, int] = {}
        for appt in appointments:
            status = appt.status or "unknown"
            by_status[status] = by_status.get(status, 0) + 1

        by_vehicle_type: Dict[str, int] = {}
        for appt in appointments:
            by_vehicle_type[appt.vehicle_type] = by_vehicle_type.get(appt.vehicle_type, 0) + 1

        booked_revenue = sum(
            float(appt.price)
            for appt in appointments
            if appt.price is not None and appt.status != AppointmentStatus.CANCELLED.value
        )

        return {
            "total_appointments": len(appointments),
            "by_status": by_status,
            "by_vehicle_type": by_vehicle_type,
            "booked_revenue": round(booked_revenue, 2),
            "unique_customers": len(set(appt.phone for appt in appointments if appt.phone)),
        }
