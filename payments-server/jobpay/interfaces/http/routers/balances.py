"""Balance deposit endpoint."""

from fastapi import APIRouter, Depends

from jobpay.interfaces.http.deps import get_payment_service
from jobpay.interfaces.http.errors import PAYMENT_ERROR_RESPONSES, payment_http_error
from jobpay.modules.payments import PaymentError, PaymentService
from jobpay.modules.payments.amounts import from_cents
from jobpay.schemas import DepositRequest, DepositResponse

router = APIRouter()


@router.post(
    "/deposit/{user_id}",
    response_model=DepositResponse,
    responses=PAYMENT_ERROR_RESPONSES,
    summary="Deposit into a client's balance",
)
async def deposit(
    user_id: int,
    payload: DepositRequest,
    payments: PaymentService = Depends(get_payment_service),
) -> DepositResponse:
    try:
        result = await payments.deposit_balance(user_id, payload.amount)
    except PaymentError as exc:
        raise payment_http_error(exc) from exc
    return DepositResponse(balance=float(from_cents(result.balance_cents)), version=result.version)
