"""Contract lookup endpoints scoped to the calling profile."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobpay.interfaces.http.deps import get_current_profile, get_db_session
from jobpay.modules.accounts import Account
from jobpay.modules.contracts import ContractNotFoundError, ContractService
from jobpay.schemas import ContractListResponse, ContractResponse

router = APIRouter()


@router.get("/{contract_id}", response_model=ContractResponse, summary="Get one of the caller's contracts")
async def get_contract(
    contract_id: int,
    profile: Account = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
) -> ContractResponse:
    service = ContractService.with_session(db)
    try:
        contract = await service.get_contract(contract_id, profile.id)
    except ContractNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contract not found") from exc
    return ContractResponse.model_validate(contract)


@router.get("", response_model=ContractListResponse, summary="List the caller's non-terminated contracts")
async def list_contracts(
    profile: Account = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
) -> ContractListResponse:
    contracts = await ContractService.with_session(db).list_contracts(profile.id)
    return ContractListResponse(
        total=len(contracts),
        contracts=[ContractResponse.model_validate(contract) for contract in contracts],
    )
