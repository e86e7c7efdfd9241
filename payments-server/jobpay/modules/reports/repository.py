"""Repository protocol for reporting queries."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import ClientPayments, ProfessionEarnings


class ReportRepository(Protocol):
    async def earnings_by_profession(self, start: datetime, end: datetime) -> Sequence[ProfessionEarnings]:
        ...

    async def payments_by_client(self, start: datetime, end: datetime, limit: int) -> Sequence[ClientPayments]:
        ...
