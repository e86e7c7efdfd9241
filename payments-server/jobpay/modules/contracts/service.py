"""Contract domain service."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.modules.accounts.models import Account

from .exceptions import ContractNotFoundError, InvalidContractPartiesError
from .models import CONTRACT_STATUSES, STATUS_NEW, Contract
from .repository import ContractRepository


@dataclass(slots=True)
class ContractService:
    repository: ContractRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ContractService":
        from jobpay.infrastructure.database.repositories.contract_repository import SqlContractRepository

        return cls(SqlContractRepository(session))

    async def get_contract(self, contract_id: int, profile_id: int) -> Contract:
        contract = await self.repository.get_for_profile(contract_id, profile_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)
        return contract

    async def list_contracts(self, profile_id: int) -> list[Contract]:
        return list(await self.repository.list_active_for_profile(profile_id))

    async def create_contract(
        self,
        *,
        client: Account,
        contractor: Account,
        terms: str,
        status: str = STATUS_NEW,
    ) -> Contract:
        if not client.is_client() or not contractor.is_contractor():
            raise InvalidContractPartiesError(f"{client.id} -> {contractor.id}")
        if status not in CONTRACT_STATUSES:
            raise ValueError(f"unknown contract status: {status}")
        return await self.repository.create_contract(
            terms=terms,
            status=status,
            client_id=client.id,
            contractor_id=contractor.id,
        )
