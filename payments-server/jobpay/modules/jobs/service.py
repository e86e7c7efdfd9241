"""Job domain service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .models import Job
from .repository import JobRepository


@dataclass(slots=True)
class JobService:
    repository: JobRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "JobService":
        from jobpay.infrastructure.database.repositories.job_repository import SqlJobRepository

        return cls(SqlJobRepository(session))

    async def list_unpaid(self, profile_id: int) -> list[Job]:
        """Unpaid jobs on the caller's in-progress contracts, either side."""
        return list(await self.repository.list_unpaid_for_profile(profile_id))

    async def get_job(self, job_id: int) -> Job | None:
        return await self.repository.get_job(job_id)

    async def create_job(
        self,
        *,
        contract_id: int,
        description: str,
        price_cents: int,
        paid_at: Optional[datetime] = None,
    ) -> Job:
        """Register a job. ``paid_at`` imports a job already settled outside the engine."""
        if price_cents <= 0:
            raise ValueError("job price must be positive")
        return await self.repository.create_job(
            contract_id=contract_id,
            description=description,
            price_cents=price_cents,
            paid_at=paid_at,
        )
