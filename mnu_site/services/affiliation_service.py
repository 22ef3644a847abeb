# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Affiliation submissions.
validate -> apply defaults -> store -> notify. A failed notification never
undoes the stored record; it only changes the reply.
"""

from typing import Any

from mnu_site.core.logging import get_logger
from mnu_site.metrics.prometheus import AFFILIATIONS_STORED, FORM_SUBMISSIONS
from mnu_site.repositories.affiliation_repository import AffiliationRepository
from mnu_site.services.email_messages import AFFILIATION_SUBJECT, affiliation_email
from mnu_site.services.email_sender import NOTIFICATION_RECIPIENT, EmailSender
from mnu_site.services.validation import STEP_FIELDS, SubmissionRejected, validate_form

logger = get_logger(__name__)

DEFAULT_DISABILITY = "none"
DEFAULT_QUALIFICATIONS = ""

MSG_SUBMITTED = "Affiliation submitted successfully"
MSG_STORED_NOT_NOTIFIED = "Affiliation stored successfully but email notification failed"


class AffiliationService:
    """Business logic for membership applications."""

    def __init__(self, repo: AffiliationRepository, email_sender: EmailSender) -> None:
        self._repo = repo
        self._email = email_sender

    # ── Commands ──

    async def submit(self, raw: Any) -> dict[str, Any]:
        """Accept an affiliation. Raises SubmissionRejected on invalid input."""
        result = validate_form("affiliation", raw)
        if not result.valid:
            FORM_SUBMISSIONS.labels(form="affiliation", outcome="rejected").inc()
            logger.info("Affiliation rejected: fields=%s", sorted(result.fields_in_error()))
            raise SubmissionRejected(result.errors)

        form = result.value
        fields = form.model_dump()
        fields["disability"] = form.disability or DEFAULT_DISABILITY
        fields["qualifications"] = form.qualifications or DEFAULT_QUALIFICATIONS
        record = self._repo.create(fields)
        AFFILIATIONS_STORED.set(self._repo.count())
        logger.info("Affiliation stored id=%s province=%s", record.id, record.province)

        html, text = affiliation_email(form)
        sent = await self._email.send(NOTIFICATION_RECIPIENT, AFFILIATION_SUBJECT, html, text)
        if not sent.success:
            FORM_SUBMISSIONS.labels(form="affiliation", outcome="stored_not_notified").inc()
            logger.error("Affiliation %s stored but notification failed: %s", record.id, sent.error)
            return {"message": MSG_STORED_NOT_NOTIFIED, "affiliation": record, "error": sent.error}

        FORM_SUBMISSIONS.labels(form="affiliation", outcome="accepted").inc()
        return {"message": MSG_SUBMITTED, "affiliation": record}

    # ── Queries ──

    def check_step(self, step: int, raw: Any) -> dict[str, Any]:
        """Validate only the fields of one wizard step. No side effects."""
        result = validate_form("affiliation", raw, fields=STEP_FIELDS[step])
        return {"step": step, "valid": result.valid, "errors": result.errors}
