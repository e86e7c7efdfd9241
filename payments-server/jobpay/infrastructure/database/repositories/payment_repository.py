"""SQLAlchemy implementation of the payment store.

Balance writes are compare-and-swap UPDATEs keyed on ``(id, version)``; a
write that matches no row means another writer got there first. Every
mutating call commits or rolls back its own unit before returning.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.db.models import Contract as ContractModel, Job as JobModel, Profile as ProfileModel
from jobpay.infrastructure.database.repositories.account_repository import SqlAccountRepository
from jobpay.modules.accounts.models import Account
from jobpay.modules.payments.exceptions import StaleVersionError, StorageUnavailableError
from jobpay.modules.payments.models import BalanceWrite, JobPayment, JobWithParties

logger = logging.getLogger(__name__)


class SqlPaymentStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._accounts = SqlAccountRepository(session)

    @asynccontextmanager
    async def _storage_errors(self) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Payment storage failure: %s", exc)
            await self.session.rollback()
            raise StorageUnavailableError() from exc

    async def get_account(self, account_id: int) -> Account | None:
        async with self._storage_errors():
            return await self._accounts.get_by_id(account_id)

    async def get_job_with_parties(self, job_id: int) -> JobWithParties | None:
        stmt = (
            select(
                JobModel.id,
                JobModel.price_cents,
                JobModel.paid,
                JobModel.version,
                ContractModel.client_id,
                ContractModel.contractor_id,
            )
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .where(JobModel.id == job_id)
        )
        async with self._storage_errors():
            result = await self.session.execute(stmt)
            row = result.first()
        if row is None:
            return None
        return JobWithParties(
            id=row.id,
            price_cents=row.price_cents,
            paid=bool(row.paid),
            version=row.version,
            client_id=row.client_id,
            contractor_id=row.contractor_id,
        )

    async def sum_unpaid_job_prices(self, client_id: int) -> int:
        stmt = (
            select(func.coalesce(func.sum(JobModel.price_cents), 0))
            .join(ContractModel, JobModel.contract_id == ContractModel.id)
            .where(ContractModel.client_id == client_id, JobModel.paid.is_(False))
        )
        async with self._storage_errors():
            result = await self.session.execute(stmt)
            return int(result.scalar_one())

    async def conditional_update_account(
        self,
        account_id: int,
        expected_version: int,
        new_balance_cents: int,
    ) -> int:
        async with self._storage_errors():
            await self._write_balance(BalanceWrite(account_id, expected_version, new_balance_cents))
            await self.session.commit()
        return expected_version + 1

    async def commit_atomic(
        self,
        writes: Sequence[BalanceWrite],
        job_payment: JobPayment | None = None,
    ) -> None:
        async with self._storage_errors():
            for write in writes:
                await self._write_balance(write)
            if job_payment is not None:
                await self._mark_job_paid(job_payment)
            await self.session.commit()

    async def _write_balance(self, write: BalanceWrite) -> None:
        stmt = (
            update(ProfileModel)
            .where(
                ProfileModel.id == write.account_id,
                ProfileModel.version == write.expected_version,
            )
            .values(
                balance_cents=write.new_balance_cents,
                version=ProfileModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            await self.session.rollback()
            raise StaleVersionError("profile", write.account_id, write.expected_version)

    async def _mark_job_paid(self, payment: JobPayment) -> None:
        stmt = (
            update(JobModel)
            .where(
                JobModel.id == payment.job_id,
                JobModel.version == payment.expected_version,
                JobModel.paid.is_(False),
            )
            .values(
                paid=True,
                payment_date=payment.payment_date,
                version=JobModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            await self.session.rollback()
            raise StaleVersionError("job", payment.job_id, payment.expected_version)
