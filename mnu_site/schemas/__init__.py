# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Pydantic form and response schemas.

The form models (AffiliationForm, ContactForm) are the single rule set for
both the wizard's step checks and the authoritative server-side pass.
"""

from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Gender = Literal["male", "female", "non-binary", "prefer-not-to-say"]
Sector = Literal["government", "private"]
Province = Literal[
    "Eastern Cape",
    "Free State",
    "Gauteng",
    "KwaZulu-Natal",
    "Limpopo",
    "Mpumalanga",
    "Northern Cape",
    "North West",
    "Western Cape",
]

# Option lists for the wizard select boxes.
GENDERS = get_args(Gender)
SECTORS = get_args(Sector)
PROVINCES = get_args(Province)


# ── Forms ──

class AffiliationForm(BaseModel):
    """Membership application as submitted by the join wizard."""
    name: str = Field(..., min_length=2)
    surname: str = Field(..., min_length=2)
    age: int = Field(..., ge=18, le=100)
    gender: Gender
    sector: Sector
    disability: Optional[str] = None
    nationality: str = Field(..., min_length=2)
    province: Province
    municipality: str = Field(..., min_length=2)
    ward: str = Field(..., min_length=1)
    qualifications: Optional[str] = None


class ContactForm(BaseModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    message: str = Field(..., min_length=10)


class InsertUser(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


# ── Stored records ──

class AffiliationRecord(BaseModel):
    """An accepted affiliation. Never updated once stored."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    surname: str
    age: int
    gender: str
    sector: str
    disability: str
    nationality: str
    province: str
    municipality: str
    ward: str
    qualifications: str
    created_at: str = Field(..., alias="createdAt")


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    password: str


# ── Validation results ──

class FieldError(BaseModel):
    code: str
    message: str
    path: list[str | int] = Field(default_factory=list)


# ── Responses ──

class AffiliationSubmitResponse(BaseModel):
    message: str
    affiliation: AffiliationRecord
    error: Optional[str] = None


class ContactSubmitResponse(BaseModel):
    message: str


class StepValidationResponse(BaseModel):
    step: int
    valid: bool
    errors: list[FieldError]


class ValidationErrorResponse(BaseModel):
    message: str = "Validation error"
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
