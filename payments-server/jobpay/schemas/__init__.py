"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from jobpay.modules.jobs.models import Job
from jobpay.modules.payments.amounts import from_cents
from jobpay.modules.reports.models import ClientPayments, ProfessionEarnings


class ContractResponse(BaseModel):
    id: int
    terms: str
    status: str
    client_id: int
    contractor_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContractListResponse(BaseModel):
    total: int
    contracts: list[ContractResponse] = Field(default_factory=list)


class JobResponse(BaseModel):
    id: int
    description: str
    price: float
    paid: bool
    payment_date: Optional[datetime] = None
    contract_id: int

    @classmethod
    def from_domain(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            description=job.description,
            price=float(from_cents(job.price_cents)),
            paid=job.paid,
            payment_date=job.payment_date,
            contract_id=job.contract_id,
        )


class JobListResponse(BaseModel):
    total: int
    jobs: list[JobResponse] = Field(default_factory=list)


class DepositRequest(BaseModel):
    # validated by the payment engine so malformed amounts map to invalid_amount
    amount: Any = None


class DepositResponse(BaseModel):
    balance: float
    version: int


class BestProfessionResponse(BaseModel):
    profession: str
    total_earned: float

    @classmethod
    def from_domain(cls, row: ProfessionEarnings) -> "BestProfessionResponse":
        return cls(profession=row.profession, total_earned=float(from_cents(row.total_earned_cents)))


class BestClientResponse(BaseModel):
    id: int
    full_name: str
    total_paid: float

    @classmethod
    def from_domain(cls, row: ClientPayments) -> "BestClientResponse":
        return cls(id=row.id, full_name=row.full_name, total_paid=float(from_cents(row.total_paid_cents)))


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    detail: ErrorDetail
