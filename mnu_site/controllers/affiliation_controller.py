# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Affiliation (membership) submissions and wizard step checks.
Thin HTTP layer — delegates all logic to AffiliationService.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from mnu_site.core.dependencies import get_affiliation_service
from mnu_site.core.logging import get_logger
from mnu_site.schemas import (
    AffiliationSubmitResponse, ErrorResponse, StepValidationResponse, ValidationErrorResponse,
)
from mnu_site.services.affiliation_service import AffiliationService
from mnu_site.services.validation import SubmissionRejected

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Affiliations"])


@router.post(
    "/affiliations",
    response_model=AffiliationSubmitResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_affiliation(
    payload: Any = Body(...),
    service: AffiliationService = Depends(get_affiliation_service),
):
    """Store a membership application and notify the union mailbox."""
    try:
        return await service.submit(payload)
    except SubmissionRejected as e:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(errors=e.errors).model_dump(),
        )
    except Exception:
        logger.exception("Error processing affiliation")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


@router.post("/affiliations/validate", response_model=StepValidationResponse)
async def validate_affiliation_step(
    payload: Any = Body(...),
    step: int = Query(..., ge=1, le=2, description="Wizard step (1 or 2)"),
    service: AffiliationService = Depends(get_affiliation_service),
):
    """Check the fields of one wizard step before the user moves on."""
    return service.check_step(step, payload)
