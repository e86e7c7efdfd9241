"""Caller identification from the ``profile_id`` header."""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.modules.accounts import Account, AccountService

from .database import get_db_session


async def get_current_profile(
    profile_id: Optional[int] = Header(default=None, convert_underscores=False),
    db: AsyncSession = Depends(get_db_session),
) -> Account:
    if profile_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing profile_id header")
    account = await AccountService.with_session(db).get_by_id(profile_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown profile")
    return account


__all__ = ["get_current_profile"]
