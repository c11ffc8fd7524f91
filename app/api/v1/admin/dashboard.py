# ============================================================================
# FILE: app/api/v1/admin/dashboard.py
# Admin overview - counts, revenue and today's wash schedule
# ============================================================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from app.api.dependencies import get_current_admin
from app.config.database import get_db
from app.services.appointment.appointment_query_service import AppointmentQueryService
from app.services.order.order_service import OrderService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/summary")
async def get_summary(
        on_date: Optional[date] = Query(None, alias="date", description="Schedule day (defaults to today)"),
        admin: str = Depends(get_current_admin),
        db: Session = Depends(get_db)
):
    """
    Dashboard numbers for appointments and orders.
    Requires admin token.
    """
    schedule_date = on_date or date.today()

    return {
        "appointments": AppointmentQueryService.get_appointment_stats(db),
        "orders": OrderService.get_order_stats(db),
        "schedule": {
            "date": schedule_date.isoformat(),
            "appointments": AppointmentQueryService.get_day_schedule(db, schedule_date),
        },
    }
