"""Translation of payment engine errors into HTTP responses."""

from fastapi import HTTPException, status

from jobpay.modules.payments import (
    ConflictError,
    ForbiddenError,
    PaymentError,
    PaymentRejectedError,
    StorageUnavailableError,
)
from jobpay.schemas import ErrorResponse

PAYMENT_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Rejected by a business rule"},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Caller lacks the required role"},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Lost a concurrent update, retry"},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse, "description": "Payment storage unavailable"},
}


def payment_http_error(exc: PaymentError) -> HTTPException:
    if isinstance(exc, ForbiddenError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, PaymentRejectedError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, StorageUnavailableError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail={"code": exc.code, "message": exc.message})
