"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: int) -> Account | None:
        ...

    async def list_accounts(self) -> Sequence[Account]:
        ...

    async def create_account(
        self,
        *,
        first_name: str,
        last_name: str,
        profession: str,
        role: str,
        balance_cents: int,
    ) -> Account:
        ...
