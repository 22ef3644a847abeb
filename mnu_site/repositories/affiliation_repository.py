# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Affiliation data access.
In-memory store keyed by an auto-incrementing integer id.
"""

import threading
from datetime import datetime, timezone
from typing import Any, Optional

from mnu_site.schemas import AffiliationRecord


class AffiliationRepository:
    """In-memory affiliation storage. Records are lost on restart."""

    def __init__(self) -> None:
        self._store: dict[int, AffiliationRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    # ── Read ──

    def get(self, affiliation_id: int) -> Optional[AffiliationRecord]:
        return self._store.get(affiliation_id)

    def list_all(self) -> list[AffiliationRecord]:
        """All records in insertion order."""
        with self._lock:
            return list(self._store.values())

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def create(self, fields: dict[str, Any]) -> AffiliationRecord:
        """Store a validated affiliation, assigning id and created_at."""
        with self._lock:
            record = AffiliationRecord(
                **fields,
                id=self._next_id,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            self._store[record.id] = record
            self._next_id += 1
        return record

    # ── Bulk / internal ──

    def clear(self) -> None:
        """Drop all records. The id counter is not rewound."""
        with self._lock:
            self._store.clear()
