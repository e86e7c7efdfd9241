"""Account module exports"""

from .exceptions import AccountError, AccountNotFoundError, InvalidRoleError
from .models import CLIENT_ROLE, CONTRACTOR_ROLE, Account
from .service import AccountService

__all__ = [
    "Account",
    "AccountError",
    "AccountNotFoundError",
    "AccountService",
    "CLIENT_ROLE",
    "CONTRACTOR_ROLE",
    "InvalidRoleError",
]
