# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints — health, readiness, metrics."""
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from mnu_site.core.config import settings
from mnu_site.core.dependencies import get_affiliation_repo, get_email_sender
from mnu_site.repositories.affiliation_repository import AffiliationRepository
from mnu_site.services.email_sender import EmailSender

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@router.get("/health/ready")
async def readiness_check(
    repo: AffiliationRepository = Depends(get_affiliation_repo),
    sender: EmailSender = Depends(get_email_sender),
):
    """Always ready: storage is in memory and email has a log-only fallback."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "affiliations_stored": repo.count(),
        "email_provider": sender.provider,
    }


@router.get("/metrics")
async def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
