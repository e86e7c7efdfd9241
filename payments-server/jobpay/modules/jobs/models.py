"""Domain model for jobs billed under a contract."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Job:
    id: int
    description: str
    price_cents: int
    paid: bool
    payment_date: Optional[datetime]
    contract_id: int
    created_at: Optional[datetime] = None
