"""
Pytest configuration and fixtures.

Every test gets its own SQLite file so concurrent sessions really contend
for the same rows.
"""
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Any

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from jobpay.infrastructure.database.session import init_db
from jobpay.interfaces.http.deps import get_db_session
from jobpay.main import create_app
from jobpay.modules.accounts import CLIENT_ROLE, CONTRACTOR_ROLE, Account, AccountService
from jobpay.modules.contracts import STATUS_IN_PROGRESS, Contract, ContractService
from jobpay.modules.jobs import Job, JobService


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, Any]:
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'jobpay_test.db'}",
        connect_args={"timeout": 5},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, Any]:
    async with session_factory() as session:
        yield session


class Factory:
    """Creates committed profiles, contracts and jobs through the domain services."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def profile(
        self,
        role: str,
        balance_cents: int = 0,
        *,
        first_name: str = "Test",
        last_name: str = "Profile",
        profession: str = "Tester",
    ) -> Account:
        async with self._session_factory() as session:
            account = await AccountService.with_session(session).create_account(
                first_name=first_name,
                last_name=last_name,
                profession=profession,
                role=role,
                balance_cents=balance_cents,
            )
            await session.commit()
        return account

    async def contract(self, client: Account, contractor: Account, status: str = STATUS_IN_PROGRESS) -> Contract:
        async with self._session_factory() as session:
            contract = await ContractService.with_session(session).create_contract(
                client=client,
                contractor=contractor,
                terms="bla bla bla",
                status=status,
            )
            await session.commit()
        return contract

    async def job(self, contract: Contract, price_cents: int, paid_at=None, description: str = "work") -> Job:
        async with self._session_factory() as session:
            job = await JobService.with_session(session).create_job(
                contract_id=contract.id,
                description=description,
                price_cents=price_cents,
                paid_at=paid_at,
            )
            await session.commit()
        return job

    async def reload(self, account_id: int) -> Account:
        async with self._session_factory() as session:
            return await AccountService.with_session(session).require(account_id)

    async def reload_job(self, job_id: int) -> Job:
        async with self._session_factory() as session:
            job = await JobService.with_session(session).get_job(job_id)
        assert job is not None
        return job


@pytest_asyncio.fixture
async def factory(session_factory: async_sessionmaker[AsyncSession]) -> Factory:
    return Factory(session_factory)


@dataclass
class PaymentScenario:
    client: Account
    contractor: Account
    contract: Contract
    job: Job


@pytest_asyncio.fixture
async def scenario(factory: Factory) -> PaymentScenario:
    """Client with 1000.00, contractor with 500.00 and one unpaid 200.00 job between them."""
    client = await factory.profile(CLIENT_ROLE, 100_000, first_name="Cleo", last_name="Client", profession="Owner")
    contractor = await factory.profile(
        CONTRACTOR_ROLE, 50_000, first_name="Theo", last_name="Trader", profession="Programmer"
    )
    contract = await factory.contract(client, contractor)
    job = await factory.job(contract, 20_000)
    return PaymentScenario(client=client, contractor=contractor, contract=contract, job=job)


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, Any]:
    """HTTP client whose requests use the per-test database."""
    app = create_app()

    async def override_db_session() -> AsyncGenerator[AsyncSession, Any]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
