"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .contract_repository import SqlContractRepository
from .job_repository import SqlJobRepository
from .payment_repository import SqlPaymentStore
from .report_repository import SqlReportRepository

__all__ = [
    "SqlAccountRepository",
    "SqlContractRepository",
    "SqlJobRepository",
    "SqlPaymentStore",
    "SqlReportRepository",
]
