"""SQLAlchemy implementation for reporting queries"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.db.models import Contract as ContractModel, Job as JobModel, Profile as ProfileModel
from jobpay.modules.reports.models import ClientPayments, ProfessionEarnings


class SqlReportRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def earnings_by_profession(self, start: datetime, end: datetime) -> Sequence[ProfessionEarnings]:
        total = func.sum(JobModel.price_cents).label("total_earned")
        stmt = (
            select(ProfileModel.profession, total)
            .select_from(JobModel)
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .join(ProfileModel, ContractModel.contractor_id == ProfileModel.id)
            .where(
                JobModel.paid.is_(True),
                JobModel.payment_date >= start,
                JobModel.payment_date < end,
            )
            .group_by(ProfileModel.profession)
            .order_by(desc(total))
        )
        result = await self.session.execute(stmt)
        return [
            ProfessionEarnings(profession=profession, total_earned_cents=int(earned))
            for profession, earned in result.all()
        ]

    async def payments_by_client(self, start: datetime, end: datetime, limit: int) -> Sequence[ClientPayments]:
        total = func.sum(JobModel.price_cents).label("total_paid")
        stmt = (
            select(ProfileModel.id, ProfileModel.first_name, ProfileModel.last_name, total)
            .select_from(JobModel)
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .join(ProfileModel, ContractModel.client_id == ProfileModel.id)
            .where(
                JobModel.paid.is_(True),
                JobModel.payment_date >= start,
                JobModel.payment_date < end,
            )
            .group_by(ProfileModel.id, ProfileModel.first_name, ProfileModel.last_name)
            .order_by(desc(total), ProfileModel.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            ClientPayments(id=client_id, full_name=f"{first} {last}", total_paid_cents=int(paid))
            for client_id, first, last, paid in result.all()
        ]
