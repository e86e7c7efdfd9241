"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.db.models import Profile as ProfileModel
from jobpay.modules.accounts.models import Account


class SqlAccountRepository:
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_accounts(self) -> Sequence[Account]:
        stmt = select(ProfileModel).order_by(ProfileModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_account(
        self,
        *,
        first_name: str,
        last_name: str,
        profession: str,
        role: str,
        balance_cents: int,
    ) -> Account:
        model = ProfileModel(
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            role=role,
            balance_cents=balance_cents,
            version=0,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: ProfileModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            profession=model.profession,
            role=model.role,
            balance_cents=model.balance_cents,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
