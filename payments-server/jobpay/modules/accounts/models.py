"""Domain models for accounts (profiles)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

CLIENT_ROLE = "client"
CONTRACTOR_ROLE = "contractor"


@dataclass(slots=True)
class Account:
    id: int
    first_name: str
    last_name: str
    profession: str
    role: str
    balance_cents: int
    version: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_client(self) -> bool:
        return self.role == CLIENT_ROLE

    def is_contractor(self) -> bool:
        return self.role == CONTRACTOR_ROLE
