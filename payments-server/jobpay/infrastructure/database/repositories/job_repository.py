"""SQLAlchemy implementation for job repository"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.db.models import Contract as ContractModel, Job as JobModel
from jobpay.modules.contracts.models import STATUS_IN_PROGRESS
from jobpay.modules.jobs.models import Job


class SqlJobRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_unpaid_for_profile(self, profile_id: int) -> Sequence[Job]:
        stmt = (
            select(JobModel)
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .where(
                or_(ContractModel.client_id == profile_id, ContractModel.contractor_id == profile_id),
                ContractModel.status == STATUS_IN_PROGRESS,
                JobModel.paid.is_(False),
            )
            .order_by(JobModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_job(self, job_id: int) -> Job | None:
        stmt = (
            select(JobModel)
            .where(JobModel.id == job_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def create_job(
        self,
        *,
        contract_id: int,
        description: str,
        price_cents: int,
        paid_at: datetime | None = None,
    ) -> Job:
        model = JobModel(
            contract_id=contract_id,
            description=description,
            price_cents=price_cents,
            paid=paid_at is not None,
            payment_date=paid_at,
            version=0,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: JobModel) -> Job:
        return Job(
            id=model.id,
            description=model.description,
            price_cents=model.price_cents,
            paid=bool(model.paid),
            payment_date=model.payment_date,
            contract_id=model.contract_id,
            created_at=model.created_at,
        )
