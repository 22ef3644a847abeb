# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, env-driven and read once at import.
A missing SENDGRID_API_KEY is not an error: email falls back to log-only mode.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "mnu-website")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "5000"))

    SENDGRID_API_KEY: str = os.getenv("SENDGRID_API_KEY", "")
    SENDGRID_API_URL: str = os.getenv(
        "SENDGRID_API_URL", "https://api.sendgrid.com/v3/mail/send"
    )
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "noreply@mkhontonationalunion.com")
    EMAIL_TIMEOUT: float = float(os.getenv("EMAIL_TIMEOUT", "10.0"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
