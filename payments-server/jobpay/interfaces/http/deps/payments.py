"""Payment engine dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.core.config import get_settings
from jobpay.modules.payments import PaymentService

from .database import get_db_session


def get_payment_service(db: AsyncSession = Depends(get_db_session)) -> PaymentService:
    return PaymentService.with_session(db, get_settings())


__all__ = ["get_payment_service"]
