"""Reporting service over paid jobs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from .models import ClientPayments, ProfessionEarnings
from .repository import ReportRepository


class InvalidReportRangeError(ValueError):
    """Raised when a report window is empty or reversed."""


@dataclass(slots=True)
class ReportService:
    repository: ReportRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ReportService":
        from jobpay.infrastructure.database.repositories.report_repository import SqlReportRepository

        return cls(SqlReportRepository(session))

    async def best_profession(self, start: datetime, end: datetime) -> ProfessionEarnings | None:
        """Profession that earned the most from jobs paid within ``[start, end)``."""
        start, end = self._check_range(start, end)
        rows = await self.repository.earnings_by_profession(start, end)
        return rows[0] if rows else None

    async def best_clients(self, start: datetime, end: datetime, limit: int) -> list[ClientPayments]:
        start, end = self._check_range(start, end)
        if limit < 1:
            raise InvalidReportRangeError("limit must be at least 1")
        return list(await self.repository.payments_by_client(start, end, limit))

    @staticmethod
    def _check_range(start: datetime, end: datetime) -> tuple[datetime, datetime]:
        start, end = _as_utc(start), _as_utc(end)
        if start >= end:
            raise InvalidReportRangeError("start must be before end")
        return start, end


def _as_utc(value: datetime) -> datetime:
    # payment dates are stored in UTC; naive inputs are taken as UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
