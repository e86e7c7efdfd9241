"""Payment engine: job payments and client deposits."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.core.config import Settings, get_settings

from .amounts import to_cents
from .exceptions import (
    AlreadyPaidError,
    ConflictError,
    ForbiddenError,
    InsufficientBalanceError,
    InvalidAccountError,
    InvalidJobError,
    LimitExceededError,
    NoUnpaidObligationsError,
    StaleVersionError,
)
from .guard import ConcurrencyGuard
from .models import DepositResult, JobPayment, PaymentReceipt
from .repository import PaymentStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentService:
    """Moves money between profile balances.

    Every business rule is checked against a fresh read before anything is
    written. Writes go through the concurrency guard, so a lost race
    surfaces as ``ConflictError`` with no state changed.
    """

    def __init__(
        self,
        store: PaymentStore,
        *,
        deposit_limit_ratio: Decimal = Decimal("0.25"),
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._guard = ConcurrencyGuard(store)
        self._deposit_limit_ratio = deposit_limit_ratio
        self._clock = clock or _utcnow

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings | None = None) -> "PaymentService":
        from jobpay.infrastructure.database.repositories.payment_repository import SqlPaymentStore

        settings = settings or get_settings()
        return cls(SqlPaymentStore(session), deposit_limit_ratio=settings.deposit_limit_ratio)

    async def pay_job(self, job_id: int, caller_id: int) -> PaymentReceipt:
        client = await self._store.get_account(caller_id)
        if client is None or not client.is_client():
            logger.warning("Profile %s may not pay job %s", caller_id, job_id)
            raise ForbiddenError("Only clients can pay for jobs")

        job = await self._store.get_job_with_parties(job_id)
        if job is None or job.client_id != client.id:
            raise InvalidJobError("Invalid job id")
        if job.paid:
            raise AlreadyPaidError("Job already paid")
        if client.balance_cents < job.price_cents:
            raise InsufficientBalanceError("Insufficient balance")

        contractor = await self._store.get_account(job.contractor_id)
        if contractor is None:
            raise InvalidJobError("Invalid job id")

        paid_at = self._clock()
        debit = self._guard.stage(client, -job.price_cents)
        credit = self._guard.stage(contractor, job.price_cents)
        try:
            await self._guard.apply_all(
                [debit, credit],
                JobPayment(job_id=job.id, expected_version=job.version, payment_date=paid_at),
            )
        except StaleVersionError as exc:
            raise ConflictError("Job payment conflicted with a concurrent update, please retry") from exc

        logger.info(
            "Job %s paid: %s cents from profile %s to profile %s",
            job.id,
            job.price_cents,
            client.id,
            contractor.id,
        )
        return PaymentReceipt(
            job_id=job.id,
            amount_cents=job.price_cents,
            client_id=client.id,
            client_balance_cents=debit.new_balance_cents,
            contractor_id=contractor.id,
            contractor_balance_cents=credit.new_balance_cents,
            payment_date=paid_at,
        )

    async def deposit_balance(self, account_id: int, amount: Any) -> DepositResult:
        account = await self._store.get_account(account_id)
        if account is None or not account.is_client():
            raise InvalidAccountError("Invalid userId")

        amount_cents = to_cents(amount)

        unpaid_cents = await self._store.sum_unpaid_job_prices(account.id)
        if unpaid_cents <= 0:
            raise NoUnpaidObligationsError("No unpaid jobs to deposit against")
        if Decimal(amount_cents) > Decimal(unpaid_cents) * self._deposit_limit_ratio:
            logger.warning(
                "Deposit of %s cents for profile %s exceeds limit on %s unpaid cents",
                amount_cents,
                account.id,
                unpaid_cents,
            )
            raise LimitExceededError("Balance exceeds limit")

        new_balance = account.balance_cents + amount_cents
        try:
            version = await self._guard.apply(account.id, account.version, new_balance)
        except StaleVersionError as exc:
            raise ConflictError("Balance changed concurrently, deposit not applied") from exc

        logger.info("Deposited %s cents to profile %s", amount_cents, account.id)
        return DepositResult(
            account_id=account.id,
            amount_cents=amount_cents,
            balance_cents=new_balance,
            version=version,
        )
