# ===== app/tasks/email_tasks.py =====
from typing import Any, Dict
import logging

from app.config.celery_config import celery_app
from app.services.email.email_service import EmailService

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=3)
def send_appointment_confirmation_email(self, appointment: Dict[str, Any]):
    """
    Send booking confirmation to the customer and a notice to the owner

    Args:
        appointment: Serialized appointment (camelCase keys)
    """
    logger.info(f"Sending appointment confirmation email to {appointment.get('email')}")

    result = EmailService.send_appointment_confirmation(appointment)

    if not any(result.values()):
        exc = RuntimeError(f"No appointment emails delivered for {appointment.get('id')}")
        logger.error(str(exc))

        # Retry with exponential backoff: 1min, 2min, 4min
        raise self.retry(
            exc=exc,
            countdown=60 * (2 ** self.request.retries)
        )

    return {"status": "success", "appointment_id": appointment.get("id"), **result}


@celery_app.task(bind=True, max_retries=3)
def send_order_confirmation_email(self, order: Dict[str, Any]):
    """
    Send order confirmation to the customer and a notice to the owner

    Args:
        order: Serialized order (camelCase keys)
    """
    logger.info(f"Sending order confirmation email to {order.get('email')}")

    result = EmailService.send_order_confirmation(order)

    if not any(result.values()):
        exc = RuntimeError(f"No order emails delivered for {order.get('id')}")
        logger.error(str(exc))

        # Retry with exponential backoff
        raise self.retry(
            exc=exc,
            countdown=60 * (2 ** self.request.retries)
        )

    return {"status": "success", "order_id": order.get("id"), **result}
