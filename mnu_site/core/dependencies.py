# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
Built once per process; tests swap them through app.dependency_overrides.
"""

from mnu_site.core.config import settings
from mnu_site.repositories.affiliation_repository import AffiliationRepository
from mnu_site.repositories.user_repository import UserRepository
from mnu_site.services.affiliation_service import AffiliationService
from mnu_site.services.contact_service import ContactService
from mnu_site.services.email_sender import EmailSender, build_email_sender

# ── Singleton instances (in-memory stores) ──
_affiliation_repo = AffiliationRepository()
_user_repo = UserRepository()
_email_sender = build_email_sender(settings)

# ── Service instances (with injected dependencies) ──
_affiliation_service = AffiliationService(
    repo=_affiliation_repo,
    email_sender=_email_sender,
)
_contact_service = ContactService(email_sender=_email_sender)


# ── FastAPI dependency functions ──
def get_affiliation_repo() -> AffiliationRepository:
    return _affiliation_repo


def get_user_repo() -> UserRepository:
    return _user_repo


def get_email_sender() -> EmailSender:
    return _email_sender


def get_affiliation_service() -> AffiliationService:
    return _affiliation_service


def get_contact_service() -> ContactService:
    return _contact_service
