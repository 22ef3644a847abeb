# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Contact messages.
Nothing is stored, so a failed notification fails the whole request.
"""

from typing import Any

from mnu_site.core.logging import get_logger
from mnu_site.metrics.prometheus import FORM_SUBMISSIONS
from mnu_site.services.email_messages import CONTACT_SUBJECT, contact_email
from mnu_site.services.email_sender import NOTIFICATION_RECIPIENT, EmailSender
from mnu_site.services.validation import SubmissionRejected, validate_form

logger = get_logger(__name__)


class NotificationFailed(RuntimeError):
    def __init__(self, error: str | None) -> None:
        super().__init__(error or "Unknown error")
        self.error = error


class ContactService:
    def __init__(self, email_sender: EmailSender) -> None:
        self._email = email_sender

    async def submit(self, raw: Any) -> None:
        """Forward a contact message.

        Raises SubmissionRejected on invalid input and NotificationFailed
        when the email could not be delivered.
        """
        result = validate_form("contact", raw)
        if not result.valid:
            FORM_SUBMISSIONS.labels(form="contact", outcome="rejected").inc()
            logger.info("Contact message rejected: fields=%s", sorted(result.fields_in_error()))
            raise SubmissionRejected(result.errors)

        html, text = contact_email(result.value)
        sent = await self._email.send(NOTIFICATION_RECIPIENT, CONTACT_SUBJECT, html, text)
        if not sent.success:
            FORM_SUBMISSIONS.labels(form="contact", outcome="failed").inc()
            logger.error("Contact message could not be sent: %s", sent.error)
            raise NotificationFailed(sent.error)

        FORM_SUBMISSIONS.labels(form="contact", outcome="accepted").inc()
        logger.info("Contact message forwarded")
