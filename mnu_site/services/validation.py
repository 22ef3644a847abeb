# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Form validation. Turns raw request bodies into typed forms.

validate_form() never raises for bad input; rejection is returned as a list
of FieldError entries so the caller decides how to answer.
"""

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ValidationError

from mnu_site.schemas import AffiliationForm, ContactForm, FieldError

FORMS: dict[str, type[BaseModel]] = {
    "affiliation": AffiliationForm,
    "contact": ContactForm,
}

# Wizard steps of the affiliation form.
STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("name", "surname", "age", "gender", "sector", "disability", "nationality"),
    2: ("province", "municipality", "ward", "qualifications"),
}

# Human-readable messages keyed by field, then by pydantic error type.
FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "name": {
        "string_too_short": "Name must be at least 2 characters",
        "missing": "Name is required",
    },
    "surname": {
        "string_too_short": "Surname must be at least 2 characters",
        "missing": "Surname is required",
    },
    "age": {
        "greater_than_equal": "You must be at least 18 years old",
        "less_than_equal": "Age must be 100 or less",
        "int_parsing": "Age must be a whole number",
        "int_from_float": "Age must be a whole number",
        "int_type": "Age must be a whole number",
        "missing": "Age is required",
    },
    "gender": {
        "literal_error": "Please select a gender",
        "missing": "Please select a gender",
    },
    "sector": {
        "literal_error": "Please select a sector",
        "missing": "Please select a sector",
    },
    "nationality": {
        "string_too_short": "Nationality must be at least 2 characters",
        "missing": "Nationality is required",
    },
    "province": {
        "literal_error": "Please select a province",
        "missing": "Please select a province",
    },
    "municipality": {
        "string_too_short": "Municipality must be at least 2 characters",
        "missing": "Municipality is required",
    },
    "ward": {
        "string_too_short": "Ward is required",
        "missing": "Ward is required",
    },
    "email": {
        "value_error": "Please enter a valid email address",
        "missing": "Email is required",
    },
    "message": {
        "string_too_short": "Message must be at least 10 characters",
        "missing": "Message is required",
    },
}


class FormValidation:
    """Outcome of a validation pass: either a typed form or field errors."""

    def __init__(self, value: Optional[BaseModel] = None,
                 errors: Optional[list[FieldError]] = None) -> None:
        self.value = value
        self.errors = errors or []

    @property
    def valid(self) -> bool:
        return not self.errors

    def fields_in_error(self) -> set[str]:
        return {str(e.path[0]) for e in self.errors if e.path}


class SubmissionRejected(ValueError):
    """Raised by the submission services when a payload fails validation."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("Validation error")
        self.errors = errors


def to_field_errors(raw_errors: Iterable[dict[str, Any]],
                    strip_prefix: tuple[str, ...] = ()) -> list[FieldError]:
    """Convert pydantic error dicts into FieldError entries."""
    result: list[FieldError] = []
    for err in raw_errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in strip_prefix:
            loc = loc[1:]
        code = err.get("type", "invalid")
        field = str(loc[0]) if loc else ""
        message = FIELD_MESSAGES.get(field, {}).get(code, err.get("msg", "Invalid value"))
        result.append(FieldError(code=code, message=message, path=loc))
    return result


def validate_form(kind: str, raw: Any,
                  fields: Optional[Iterable[str]] = None) -> FormValidation:
    """Validate ``raw`` against the form registered under ``kind``.

    When ``fields`` is given only errors on those fields are reported and no
    value is produced: a partial pass can gate a wizard step but never
    authorise a write.
    """
    try:
        model = FORMS[kind]
    except KeyError:
        raise ValueError(f"Unknown form kind: {kind!r}") from None

    if not isinstance(raw, dict):
        return FormValidation(errors=[FieldError(
            code="model_type",
            message="Expected a JSON object",
            path=[],
        )])

    try:
        value = model.model_validate(raw)
    except ValidationError as exc:
        errors = to_field_errors(exc.errors())
        if fields is not None:
            wanted = set(fields)
            errors = [e for e in errors if e.path and e.path[0] in wanted]
        return FormValidation(errors=errors)

    if fields is not None:
        return FormValidation()
    return FormValidation(value=value)
