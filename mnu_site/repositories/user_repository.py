# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: User account data access.
Not wired to any route yet; kept for the members area.
"""

import threading
from typing import Optional

from mnu_site.schemas import InsertUser, User


class UserRepository:
    """In-memory user storage with its own id counter."""

    def __init__(self) -> None:
        self._store: dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_user(self, user_id: int) -> Optional[User]:
        return self._store.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Case-sensitive exact match."""
        with self._lock:
            users = list(self._store.values())
        return next((u for u in users if u.username == username), None)

    def create_user(self, user: InsertUser) -> User:
        with self._lock:
            created = User(id=self._next_id, **user.model_dump())
            self._store[created.id] = created
            self._next_id += 1
        return created

    def count(self) -> int:
        return len(self._store)
