# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Notification email bodies (HTML plus a plain-text alternative)."""

from html import escape
from typing import Any

from mnu_site.schemas import AffiliationForm, ContactForm

AFFILIATION_SUBJECT = "New MNU Affiliation Request"
CONTACT_SUBJECT = "New Contact Message from MNU Website"

AFFILIATION_LAYOUT: tuple[tuple[str, str], ...] = (
    ("Name", "name"),
    ("Surname", "surname"),
    ("Age", "age"),
    ("Gender", "gender"),
    ("Sector", "sector"),
    ("Disability", "disability"),
    ("Nationality", "nationality"),
    ("Province", "province"),
    ("Municipality", "municipality"),
    ("Ward", "ward"),
    ("Qualifications", "qualifications"),
)

CONTACT_LAYOUT: tuple[tuple[str, str], ...] = (
    ("Name", "name"),
    ("Email", "email"),
    ("Message", "message"),
)


def _render(title: str, layout, values: dict[str, Any]) -> tuple[str, str]:
    rows = [(label, values.get(key)) for label, key in layout]
    rows = [(label, "None" if value in (None, "") else str(value)) for label, value in rows]

    html_lines = [f"<h2>{escape(title)}</h2>"]
    html_lines += [
        f"<p><strong>{escape(label)}:</strong> {escape(value)}</p>"
        for label, value in rows
    ]
    text_lines = [title, ""] + [f"{label}: {value}" for label, value in rows]
    return "\n".join(html_lines), "\n".join(text_lines)


def affiliation_email(form: AffiliationForm) -> tuple[str, str]:
    """Render an affiliation request. Omitted optional fields show as "None"."""
    return _render("New Affiliation Request", AFFILIATION_LAYOUT, form.model_dump())


def contact_email(form: ContactForm) -> tuple[str, str]:
    return _render("New Contact Message", CONTACT_LAYOUT, form.model_dump())
