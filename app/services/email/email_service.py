# ===== app/services/email/email_service.py =====
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from html import escape
from typing import Any, Dict, List, Optional
import logging

from app.config.settings import settings

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails via SMTP"""

    @staticmethod
    def _get_smtp_connection():
        """Create and return SMTP connection"""
        try:
            if settings.EMAIL_USE_TLS:
                server = smtplib.SMTP(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=settings.EMAIL_TIMEOUT_SECONDS)
                server.starttls()
            else:
                server = smtplib.SMTP_SSL(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=settings.EMAIL_TIMEOUT_SECONDS)

            if settings.EMAIL_USERNAME and settings.EMAIL_PASSWORD:
                server.login(settings.EMAIL_USERNAME, settings.EMAIL_PASSWORD)

            return server
        except Exception as e:
            logger.error(f"Failed to connect to SMTP server: {e}")
            raise

    @staticmethod
    def send_email(
            to_email: str,
            subject: str,
            html_content: str,
            plain_text: Optional[str] = None,
            cc: Optional[List[str]] = None
    ) -> bool:
        """
        Send an email using SMTP

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_content: HTML content of the email
            plain_text: Plain text version (fallback for non-HTML clients)
            cc: List of CC email addresses

        Returns:
            bool: True if email sent successfully

        Raises:
            Exception: whatever the SMTP connection or send raised
        """
        try:
            msg = MIMEMultipart('alternative')
            msg['Subject'] = subject
            msg['From'] = f"{settings.EMAIL_FROM_NAME} <{settings.EMAIL_FROM_ADDRESS}>"
            msg['To'] = to_email

            if cc:
                msg['Cc'] = ', '.join(cc)

            if plain_text:
                msg.attach(MIMEText(plain_text, 'plain'))

            msg.attach(MIMEText(html_content, 'html'))

            recipients = [to_email]
            if cc:
                recipients.extend(cc)

            server = EmailService._get_smtp_connection()
            try:
                server.sendmail(settings.EMAIL_FROM_ADDRESS, recipients, msg.as_string())
            finally:
                server.quit()

            logger.info(f"Email sent successfully to {to_email}")
            return True

        except Exception as e:
            logger.error(f"Failed to send email to {to_email}: {e}")
            raise

    @staticmethod
    def _wrap_html(heading: str, body: str) -> str:
        return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #e0e0e0; border-radius: 5px;">
            <h2 style="color: #4CAF50; text-align: center;">{heading}</h2>
            {body}
        </div>
        """

    @staticmethod
    def _appointment_details_html(appointment: Dict[str, Any]) -> str:
        currency = settings.CURRENCY_SYMBOL
        return f"""
            <p><strong>Vehicle Type:</strong> {escape(str(appointment.get("vehicleType")))}</p>
            <p><strong>Vehicle Model:</strong> {escape(str(appointment.get("vehicleModel")))}</p>
            <p><strong>Service Package:</strong> {escape(str(appointment.get("servicePackage")))}</p>
            <p><strong>Date:</strong> {escape(str(appointment.get("date")))}</p>
            <p><strong>Time:</strong> {escape(str(appointment.get("time")))}</p>
            <p><strong>Duration:</strong> {appointment.get("duration")} minutes</p>
            <p><strong>Price:</strong> {currency}{appointment.get("price")}</p>
        """

    @staticmethod
    def send_appointment_confirmation(appointment: Dict[str, Any]) -> Dict[str, bool]:
        """
        Confirm a booking to the customer and notify the owner.

        Each message is sent independently; a failure is logged and reported in
        the result instead of stopping the other send.
        """
        name = escape(str(appointment.get("name")))
        details = EmailService._appointment_details_html(appointment)

        customer_html = EmailService._wrap_html(
            "Appointment Confirmed!",
            f"""
            <p>Dear {name},</p>
            <p>Thank you for booking an appointment with {settings.BUSINESS_NAME}. Your vehicle wash appointment has been confirmed.</p>
            <div style="background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin: 20px 0;">
                <h3 style="margin-top: 0;">Appointment Details:</h3>
                {details}
            </div>
            <p>If you need to reschedule or cancel your appointment, please contact us at {settings.BUSINESS_CONTACT_PHONE}.</p>
            <p>We look forward to serving you!</p>
            <p style="margin-top: 30px;">Best Regards,<br>{settings.BUSINESS_NAME} Team</p>
            """
        )

        owner_html = EmailService._wrap_html(
            "New Appointment Received!",
            f"""
            <p>A new vehicle wash appointment has been booked.</p>
            <div style="background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin: 20px 0;">
                <h3 style="margin-top: 0;">Customer Details:</h3>
                <p><strong>Name:</strong> {name}</p>
                <p><strong>Email:</strong> {escape(str(appointment.get("email")))}</p>
                <p><strong>Phone:</strong> {escape(str(appointment.get("phone")))}</p>
                <h3 style="margin-top: 15px;">Appointment Details:</h3>
                {details}
            </div>
            """
        )

        return EmailService._send_pair(
            customer_email=appointment.get("email"),
            customer_subject=f"Vehicle Wash Appointment Confirmation - {settings.BUSINESS_NAME}",
            customer_html=customer_html,
            owner_subject=f"New Vehicle Wash Appointment - {settings.BUSINESS_NAME}",
            owner_html=owner_html,
        )

    @staticmethod
    def send_order_confirmation(order: Dict[str, Any]) -> Dict[str, bool]:
        """Confirm an order to the customer and notify the owner."""
        currency = settings.CURRENCY_SYMBOL
        name = escape(str(order.get("name")))

        items_list = "".join(
            f"<li>{item['quantity']} × {escape(str(item['name']))} ({escape(str(item['size']))}) - "
            f"{currency}{float(item['price']) * int(item['quantity']):g}</li>"
            for item in order.get("items", [])
        )
        address = ", ".join(
            escape(str(order.get(part))) for part in ("address", "city", "state", "pincode")
        )
        summary = f"""
            <ul>{items_list}</ul>
            <p><strong>Subtotal:</strong> {currency}{order.get("subtotal")}</p>
            <p><strong>Delivery Charge:</strong> {currency}{order.get("deliveryCharge")}</p>
            <p><strong>Total:</strong> {currency}{order.get("total")}</p>
            <p><strong>Payment Method:</strong> {escape(str(order.get("paymentMethod")))}</p>
            <p><strong>Delivery Address:</strong> {address}</p>
        """

        customer_html = EmailService._wrap_html(
            "Order Confirmed!",
            f"""
            <p>Dear {name},</p>
            <p>Thank you for your order with {settings.BUSINESS_NAME}. Your order has been confirmed and is being processed.</p>
            <div style="background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin: 20px 0;">
                <h3 style="margin-top: 0;">Order Details:</h3>
                {summary}
            </div>
            <p>For any questions about your order, please contact us at {settings.BUSINESS_CONTACT_PHONE}.</p>
            <p style="margin-top: 30px;">Best Regards,<br>{settings.BUSINESS_NAME} Team</p>
            """
        )

        owner_html = EmailService._wrap_html(
            "New Order Received!",
            f"""
            <p>A new coconut oil order has been placed.</p>
            <div style="background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin: 20px 0;">
                <h3 style="margin-top: 0;">Customer Details:</h3>
                <p><strong>Name:</strong> {name}</p>
                <p><strong>Email:</strong> {escape(str(order.get("email")))}</p>
                <p><strong>Phone:</strong> {escape(str(order.get("phone")))}</p>
                <h3 style="margin-top: 15px;">Order Details:</h3>
                {summary}
            </div>
            """
        )

        return EmailService._send_pair(
            customer_email=order.get("email"),
            customer_subject=f"Order Confirmation - {settings.BUSINESS_NAME}",
            customer_html=customer_html,
            owner_subject=f"New Coconut Oil Order - {settings.BUSINESS_NAME}",
            owner_html=owner_html,
        )

    @staticmethod
    def _send_pair(
            customer_email: Optional[str],
            customer_subject: str,
            customer_html: str,
            owner_subject: str,
            owner_html: str
    ) -> Dict[str, bool]:
        result = {"customer": False, "owner": False}

        if customer_email:
            try:
                result["customer"] = EmailService.send_email(customer_email, customer_subject, customer_html)
            except Exception as e:
                logger.error(f"Error sending email to customer {customer_email}: {e}")

        if settings.OWNER_NOTIFICATION_EMAIL:
            try:
                result["owner"] = EmailService.send_email(settings.OWNER_NOTIFICATION_EMAIL, owner_subject, owner_html)
            except Exception as e:
                logger.error(f"Error sending email to owner: {e}")

        return result
