"""Payment engine exports"""

from .exceptions import (
    AlreadyPaidError,
    ConflictError,
    ForbiddenError,
    InsufficientBalanceError,
    InvalidAccountError,
    InvalidAmountError,
    InvalidJobError,
    LimitExceededError,
    NoUnpaidObligationsError,
    PaymentError,
    PaymentRejectedError,
    StaleVersionError,
    StorageUnavailableError,
)
from .guard import ConcurrencyGuard
from .models import BalanceWrite, DepositResult, JobPayment, JobWithParties, PaymentReceipt
from .service import PaymentService

__all__ = [
    "AlreadyPaidError",
    "BalanceWrite",
    "ConcurrencyGuard",
    "ConflictError",
    "DepositResult",
    "ForbiddenError",
    "InsufficientBalanceError",
    "InvalidAccountError",
    "InvalidAmountError",
    "InvalidJobError",
    "JobPayment",
    "JobWithParties",
    "LimitExceededError",
    "NoUnpaidObligationsError",
    "PaymentError",
    "PaymentReceipt",
    "PaymentRejectedError",
    "PaymentService",
    "StaleVersionError",
    "StorageUnavailableError",
]
