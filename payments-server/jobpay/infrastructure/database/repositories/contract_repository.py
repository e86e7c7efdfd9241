"""SQLAlchemy implementation for contract repository"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.db.models import Contract as ContractModel
from jobpay.modules.contracts.models import STATUS_TERMINATED, Contract


class SqlContractRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_for_profile(self, contract_id: int, profile_id: int) -> Contract | None:
        stmt = select(ContractModel).where(
            ContractModel.id == contract_id,
            or_(ContractModel.client_id == profile_id, ContractModel.contractor_id == profile_id),
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def list_active_for_profile(self, profile_id: int) -> Sequence[Contract]:
        stmt = (
            select(ContractModel)
            .where(
                or_(ContractModel.client_id == profile_id, ContractModel.contractor_id == profile_id),
                ContractModel.status != STATUS_TERMINATED,
            )
            .order_by(ContractModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_contract(
        self,
        *,
        terms: str,
        status: str,
        client_id: int,
        contractor_id: int,
    ) -> Contract:
        model = ContractModel(
            terms=terms,
            status=status,
            client_id=client_id,
            contractor_id=contractor_id,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: ContractModel) -> Contract:
        return Contract(
            id=model.id,
            terms=model.terms,
            status=model.status,
            client_id=model.client_id,
            contractor_id=model.contractor_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
