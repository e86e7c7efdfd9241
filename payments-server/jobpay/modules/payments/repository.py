"""Store protocol consumed by the payment engine."""

from __future__ import annotations

from typing import Protocol, Sequence

from jobpay.modules.accounts.models import Account

from .models import BalanceWrite, JobPayment, JobWithParties


class PaymentStore(Protocol):
    async def get_account(self, account_id: int) -> Account | None:
        ...

    async def get_job_with_parties(self, job_id: int) -> JobWithParties | None:
        ...

    async def sum_unpaid_job_prices(self, client_id: int) -> int:
        ...

    async def conditional_update_account(
        self,
        account_id: int,
        expected_version: int,
        new_balance_cents: int,
    ) -> int:
        """Return the new version or raise ``StaleVersionError``."""
        ...

    async def commit_atomic(
        self,
        writes: Sequence[BalanceWrite],
        job_payment: JobPayment | None = None,
    ) -> None:
        """Apply every write or none of them; raise ``StaleVersionError`` on any mismatch."""
        ...
