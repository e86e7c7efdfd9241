"""Contract domain specific exceptions."""


class ContractError(Exception):
    """Base class for contract related domain errors."""


class ContractNotFoundError(ContractError):
    """Raised when a contract does not exist or is not visible to the caller."""


class InvalidContractPartiesError(ContractError):
    """Raised when a contract would not link one client with one contractor."""
