"""Domain services for account management."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import AccountNotFoundError, InvalidRoleError
from .models import CLIENT_ROLE, CONTRACTOR_ROLE, Account
from .repository import AccountRepository


class AccountService:
    """Encapsulates profile lookups and onboarding."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        from jobpay.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: int) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def require(self, account_id: int) -> Account:
        account = await self._repository.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def list_accounts(self) -> Sequence[Account]:
        return await self._repository.list_accounts()

    async def create_account(
        self,
        *,
        first_name: str,
        last_name: str,
        profession: str,
        role: str,
        balance_cents: int = 0,
    ) -> Account:
        if role not in {CLIENT_ROLE, CONTRACTOR_ROLE}:
            raise InvalidRoleError(role)
        if balance_cents < 0:
            raise ValueError("opening balance cannot be negative")
        return await self._repository.create_account(
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            role=role,
            balance_cents=balance_cents,
        )
