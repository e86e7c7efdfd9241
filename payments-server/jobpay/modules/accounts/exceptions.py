"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""


class InvalidRoleError(AccountError):
    """Raised when an account is created with an unknown role."""
