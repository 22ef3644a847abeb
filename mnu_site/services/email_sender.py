# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Outbound email delivery.

Two senders share one interface. SendGridEmailSender talks to the SendGrid
v3 API; LoggingEmailSender only logs the message and reports success, so the
site keeps working when no API key is configured. The choice is made once
at startup by build_email_sender().
"""

from typing import Optional

import httpx
from pydantic import BaseModel

from mnu_site.core.logging import get_logger
from mnu_site.metrics.prometheus import EMAIL_DELIVERIES, EMAIL_SEND_LATENCY

logger = get_logger(__name__)

# Every notification goes to the union mailbox.
NOTIFICATION_RECIPIENT = "mkhontonationalunion@gmail.com"


class EmailResult(BaseModel):
    success: bool
    error: Optional[str] = None


class EmailSender:
    """Interface for notification delivery. Implementations never raise."""

    provider = "none"

    async def send(self, to: str, subject: str, html: str,
                   text: Optional[str] = None) -> EmailResult:
        raise NotImplementedError


class LoggingEmailSender(EmailSender):
    """Degraded mode: no network I/O, the message only reaches the log."""

    provider = "log"

    async def send(self, to: str, subject: str, html: str,
                   text: Optional[str] = None) -> EmailResult:
        logger.info(
            "[EMAIL NOT SENT: no provider configured] To: %s | Subject: %s | HTML: %s | Text: %s",
            to, subject, html, text,
        )
        EMAIL_DELIVERIES.labels(provider=self.provider, status="logged").inc()
        return EmailResult(success=True)


class SendGridEmailSender(EmailSender):
    """Deliver through the SendGrid v3 mail/send endpoint."""

    provider = "sendgrid"

    def __init__(self, api_key: str, from_address: str,
                 api_url: str = "https://api.sendgrid.com/v3/mail/send",
                 timeout: float = 10.0) -> None:
        self._api_key = api_key
        self._from = from_address
        self._api_url = api_url
        self._timeout = timeout

    def _build_payload(self, to: str, subject: str, html: str,
                       text: Optional[str]) -> dict:
        # SendGrid requires text/plain before text/html and rejects empty values.
        content = []
        if text:
            content.append({"type": "text/plain", "value": text})
        if html:
            content.append({"type": "text/html", "value": html})
        return {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": self._from},
            "subject": subject,
            "content": content,
        }

    async def send(self, to: str, subject: str, html: str,
                   text: Optional[str] = None) -> EmailResult:
        payload = self._build_payload(to, subject, html, text)
        try:
            with EMAIL_SEND_LATENCY.time():
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    resp = await client.post(
                        self._api_url,
                        json=payload,
                        headers={"Authorization": f"Bearer {self._api_key}"},
                    )
        except Exception as exc:
            logger.error("SendGrid request failed: %s", exc)
            EMAIL_DELIVERIES.labels(provider=self.provider, status="failed").inc()
            return EmailResult(success=False, error=str(exc) or type(exc).__name__)

        if resp.status_code >= 300:
            error = f"SendGrid returned {resp.status_code}: {resp.text}"
            logger.error("Email to %s rejected: %s", to, error)
            EMAIL_DELIVERIES.labels(provider=self.provider, status="failed").inc()
            return EmailResult(success=False, error=error)

        logger.info("Email sent to %s (status=%s)", to, resp.status_code)
        EMAIL_DELIVERIES.labels(provider=self.provider, status="sent").inc()
        return EmailResult(success=True)


def build_email_sender(settings) -> EmailSender:
    """Pick the sender for this process from configuration."""
    if not settings.SENDGRID_API_KEY:
        logger.warning("SENDGRID_API_KEY is not set; notification emails will only be logged")
        return LoggingEmailSender()
    return SendGridEmailSender(
        api_key=settings.SENDGRID_API_KEY,
        from_address=settings.EMAIL_FROM,
        api_url=settings.SENDGRID_API_URL,
        timeout=settings.EMAIL_TIMEOUT,
    )
