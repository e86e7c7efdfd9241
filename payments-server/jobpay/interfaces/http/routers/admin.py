"""Administrative reporting endpoints over paid jobs."""
from datetime import datetime
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.core.config import get_settings
from jobpay.interfaces.http.deps import get_db_session
from jobpay.modules.reports import InvalidReportRangeError, ReportService
from jobpay.schemas import BestClientResponse, BestProfessionResponse

router = APIRouter()


@router.get(
    "/best-profession",
    response_model=Union[BestProfessionResponse, dict],
    summary="Profession that earned the most in a period",
)
async def best_profession(
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: AsyncSession = Depends(get_db_session),
):
    service = ReportService.with_session(db)
    try:
        row = await service.best_profession(start, end)
    except InvalidReportRangeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if row is None:
        return {}
    return BestProfessionResponse.from_domain(row)


@router.get(
    "/best-clients",
    response_model=list[BestClientResponse],
    summary="Clients who paid the most in a period",
)
async def best_clients(
    start: datetime = Query(...),
    end: datetime = Query(...),
    limit: Optional[int] = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db_session),
) -> list[BestClientResponse]:
    service = ReportService.with_session(db)
    limit = limit or get_settings().payments.best_clients_default_limit
    try:
        rows = await service.best_clients(start, end, limit)
    except InvalidReportRangeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [BestClientResponse.from_domain(row) for row in rows]
