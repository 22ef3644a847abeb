# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from mnu_site.repositories.affiliation_repository import AffiliationRepository
from mnu_site.repositories.user_repository import UserRepository

__all__ = ["AffiliationRepository", "UserRepository"]
