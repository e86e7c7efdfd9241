"""Repository protocol for jobs."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import Job


class JobRepository(Protocol):
    async def list_unpaid_for_profile(self, profile_id: int) -> Sequence[Job]:
        ...

    async def get_job(self, job_id: int) -> Job | None:
        ...

    async def create_job(
        self,
        *,
        contract_id: int,
        description: str,
        price_cents: int,
        paid_at: datetime | None = None,
    ) -> Job:
        ...
