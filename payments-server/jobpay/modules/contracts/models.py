"""Domain model for contracts linking a client and a contractor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STATUS_NEW = "new"
STATUS_IN_PROGRESS = "in_progress"
STATUS_TERMINATED = "terminated"

CONTRACT_STATUSES = frozenset({STATUS_NEW, STATUS_IN_PROGRESS, STATUS_TERMINATED})


@dataclass(slots=True)
class Contract:
    id: int
    terms: str
    status: str
    client_id: int
    contractor_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def involves(self, profile_id: int) -> bool:
        return profile_id in (self.client_id, self.contractor_id)
