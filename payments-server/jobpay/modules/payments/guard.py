"""Optimistic concurrency guard over account balances.

The guard never retries. A write observed against an outdated version is
rejected with ``StaleVersionError`` and nothing is applied; callers decide
whether to resubmit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from jobpay.modules.accounts.models import Account

from .exceptions import StaleVersionError
from .models import BalanceWrite, JobPayment
from .repository import PaymentStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConcurrencyGuard:
    store: PaymentStore

    @staticmethod
    def stage(account: Account, delta_cents: int) -> BalanceWrite:
        """Build a conditional write moving ``account`` by ``delta_cents`` from its observed state."""
        return BalanceWrite(
            account_id=account.id,
            expected_version=account.version,
            new_balance_cents=account.balance_cents + delta_cents,
        )

    async def apply(self, account_id: int, expected_version: int, new_balance_cents: int) -> int:
        """Compare-and-swap a single balance. Returns the new version."""
        try:
            return await self.store.conditional_update_account(account_id, expected_version, new_balance_cents)
        except StaleVersionError:
            logger.warning("Stale write rejected for account %s at version %s", account_id, expected_version)
            raise

    async def apply_all(self, writes: Sequence[BalanceWrite], job_payment: JobPayment | None = None) -> None:
        """Apply a group of conditional writes as one unit."""
        account_ids = [write.account_id for write in writes]
        if len(set(account_ids)) != len(account_ids):
            raise ValueError("a unit may write each account at most once")
        try:
            await self.store.commit_atomic(writes, job_payment)
        except StaleVersionError as exc:
            logger.warning("Atomic unit rejected, %s %s is stale", exc.entity, exc.entity_id)
            raise
