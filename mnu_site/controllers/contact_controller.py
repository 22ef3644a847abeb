# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Contact form."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from mnu_site.core.dependencies import get_contact_service
from mnu_site.core.logging import get_logger
from mnu_site.schemas import ContactSubmitResponse, ErrorResponse, ValidationErrorResponse
from mnu_site.services.contact_service import ContactService, NotificationFailed
from mnu_site.services.validation import SubmissionRejected

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact",
    response_model=ContactSubmitResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_contact(
    payload: Any = Body(...),
    service: ContactService = Depends(get_contact_service),
):
    try:
        await service.submit(payload)
    except SubmissionRejected as e:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(errors=e.errors).model_dump(),
        )
    except NotificationFailed as e:
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to send message", "error": e.error},
        )
    except Exception:
        logger.exception("Error processing contact form")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
    return ContactSubmitResponse(message="Message sent successfully")
