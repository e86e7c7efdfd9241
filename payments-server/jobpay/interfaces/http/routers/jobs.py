"""Job endpoints: unpaid listing and payment."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.interfaces.http.deps import get_current_profile, get_db_session, get_payment_service
from jobpay.interfaces.http.errors import PAYMENT_ERROR_RESPONSES, payment_http_error
from jobpay.modules.accounts import Account
from jobpay.modules.jobs import JobService
from jobpay.modules.payments import PaymentError, PaymentService
from jobpay.schemas import JobListResponse, JobResponse

router = APIRouter()


@router.get("/unpaid", response_model=JobListResponse, summary="Unpaid jobs on the caller's active contracts")
async def list_unpaid_jobs(
    profile: Account = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
) -> JobListResponse:
    jobs = await JobService.with_session(db).list_unpaid(profile.id)
    return JobListResponse(total=len(jobs), jobs=[JobResponse.from_domain(job) for job in jobs])


@router.post(
    "/{job_id}/pay",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Pay a job from the caller's balance",
    responses=PAYMENT_ERROR_RESPONSES,
)
async def pay_job(
    job_id: int,
    profile: Account = Depends(get_current_profile),
    payments: PaymentService = Depends(get_payment_service),
) -> Response:
    try:
        await payments.pay_job(job_id, profile.id)
    except PaymentError as exc:
        raise payment_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
