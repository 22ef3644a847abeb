# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
MNU Website API
===============
Backend for the Mkhonto National Union site: membership (affiliation)
applications and contact messages. Submissions are validated, affiliations
are kept in memory, and every accepted form is emailed to the union mailbox
(SendGrid, or log-only when SENDGRID_API_KEY is unset).

Port: 5000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mnu_site.controllers import affiliation_controller, contact_controller, system_controller
from mnu_site.core.config import settings
from mnu_site.core.dependencies import get_email_sender
from mnu_site.core.logging import get_logger
from mnu_site.middleware import MetricsMiddleware, RequestIDMiddleware
from mnu_site.schemas import ValidationErrorResponse
from mnu_site.services.validation import to_field_errors

logger = get_logger("mnu-website")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info(
        "%s v%s starting (email provider: %s)",
        settings.SERVICE_NAME, settings.SERVICE_VERSION, get_email_sender().provider,
    )
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="MNU Website API",
    description="Affiliation and contact form submissions for the Mkhonto National Union website.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)

app.include_router(system_controller.router)
app.include_router(affiliation_controller.router)
app.include_router(contact_controller.router)


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON, missing body or bad query params answer like form errors."""
    errors = to_field_errors(exc.errors(), strip_prefix=("body", "query"))
    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(errors=errors).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
