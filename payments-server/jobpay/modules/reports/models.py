"""Read-only report rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProfessionEarnings:
    profession: str
    total_earned_cents: int


@dataclass(slots=True)
class ClientPayments:
    id: int
    full_name: str
    total_paid_cents: int
