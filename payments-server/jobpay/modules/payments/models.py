"""Value objects exchanged between the payment engine and its store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class JobWithParties:
    id: int
    price_cents: int
    paid: bool
    version: int
    client_id: int
    contractor_id: int


@dataclass(slots=True)
class BalanceWrite:
    """Conditional write: set ``new_balance_cents`` if the account is still at ``expected_version``."""

    account_id: int
    expected_version: int
    new_balance_cents: int


@dataclass(slots=True)
class JobPayment:
    """Conditional flip of a job's paid flag, applied in the same unit as the balance writes."""

    job_id: int
    expected_version: int
    payment_date: datetime


@dataclass(slots=True)
class PaymentReceipt:
    job_id: int
    amount_cents: int
    client_id: int
    client_balance_cents: int
    contractor_id: int
    contractor_balance_cents: int
    payment_date: datetime


@dataclass(slots=True)
class DepositResult:
    account_id: int
    amount_cents: int
    balance_cents: int
    version: int
