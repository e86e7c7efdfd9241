"""Payment engine exceptions.

Every rejection carries a stable ``code`` so callers can tell apart
"resubmit" (conflicts), "fix the input" and "not permitted" outcomes.
"""


class PaymentError(Exception):
    """Base class for payment engine errors."""

    code = "payment_error"

    def __init__(self, message: str | None = None) -> None:
        message = message or (self.__doc__ or "").strip()
        super().__init__(message)
        self.message = message


class PaymentRejectedError(PaymentError):
    """Business rule rejection, decided before any write."""

    code = "rejected"


class ForbiddenError(PaymentRejectedError):
    """Caller lacks the role required for this operation."""

    code = "forbidden"


class InvalidJobError(PaymentRejectedError):
    """Job does not exist or does not belong to the caller."""

    code = "invalid_job"


class InvalidAccountError(PaymentRejectedError):
    """Account does not exist or is not a client."""

    code = "invalid_account"


class AlreadyPaidError(PaymentRejectedError):
    """Job already paid."""

    code = "already_paid"


class InsufficientBalanceError(PaymentRejectedError):
    """Insufficient balance."""

    code = "insufficient_balance"


class InvalidAmountError(PaymentRejectedError):
    """Invalid amount."""

    code = "invalid_amount"


class NoUnpaidObligationsError(PaymentRejectedError):
    """Client has no unpaid jobs to deposit against."""

    code = "no_unpaid_obligations"


class LimitExceededError(PaymentRejectedError):
    """Deposit exceeds the allowed share of unpaid jobs."""

    code = "limit_exceeded"


class ConflictError(PaymentError):
    """Concurrent update detected; nothing was applied."""

    code = "conflict"


class StorageUnavailableError(PaymentError):
    """Payment storage is unavailable."""

    code = "storage_unavailable"


class StaleVersionError(PaymentError):
    """Raised by the store when a conditional write targets an outdated version."""

    code = "stale_version"

    def __init__(self, entity: str, entity_id: int, expected_version: int | None = None) -> None:
        super().__init__(f"{entity} {entity_id} changed since version {expected_version}")
        self.entity = entity
        self.entity_id = entity_id
        self.expected_version = expected_version
