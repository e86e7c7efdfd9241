"""Repository protocol for contracts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Contract


class ContractRepository(Protocol):
    async def get_for_profile(self, contract_id: int, profile_id: int) -> Contract | None:
        ...

    async def list_active_for_profile(self, profile_id: int) -> Sequence[Contract]:
        ...

    async def create_contract(
        self,
        *,
        terms: str,
        status: str,
        client_id: int,
        contractor_id: int,
    ) -> Contract:
        ...
