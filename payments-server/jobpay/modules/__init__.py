"""Domain modules and their public exports."""

from . import accounts, contracts, jobs, payments, reports

__all__ = [
    "accounts",
    "contracts",
    "jobs",
    "payments",
    "reports",
]
