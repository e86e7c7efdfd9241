"""Contract module exports"""

from .exceptions import ContractError, ContractNotFoundError, InvalidContractPartiesError
from .models import STATUS_IN_PROGRESS, STATUS_NEW, STATUS_TERMINATED, Contract
from .service import ContractService

__all__ = [
    "Contract",
    "ContractError",
    "ContractNotFoundError",
    "ContractService",
    "InvalidContractPartiesError",
    "STATUS_IN_PROGRESS",
    "STATUS_NEW",
    "STATUS_TERMINATED",
]
