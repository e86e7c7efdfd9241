"""
Concurrent writers against the same balances.

Each writer runs in its own session. A rendezvous holds every writer after
its first account read until all of them have read, so they are guaranteed
to observe the same version before anyone writes.
"""
import asyncio

import pytest

from jobpay.infrastructure.database.repositories import SqlPaymentStore
from jobpay.modules.accounts import CLIENT_ROLE, CONTRACTOR_ROLE
from jobpay.modules.payments import ConflictError, PaymentService


class Rendezvous:
    def __init__(self, parties: int) -> None:
        self._parties = parties
        self._arrived = 0
        self._released = asyncio.Event()

    async def wait(self) -> None:
        self._arrived += 1
        if self._arrived >= self._parties:
            self._released.set()
        await asyncio.wait_for(self._released.wait(), timeout=5)


class GatedStore(SqlPaymentStore):
    def __init__(self, session, rendezvous: Rendezvous) -> None:
        super().__init__(session)
        self._rendezvous = rendezvous

    async def get_account(self, account_id):
        account = await super().get_account(account_id)
        await self._rendezvous.wait()
        return account


async def run_concurrently(session_factory, calls):
    """Run ``calls(service)`` coroutines side by side, one session each."""
    rendezvous = Rendezvous(len(calls))
    sessions = [session_factory() for _ in calls]
    try:
        services = [PaymentService(GatedStore(session, rendezvous)) for session in sessions]
        return await asyncio.gather(
            *(call(service) for call, service in zip(calls, services)),
            return_exceptions=True,
        )
    finally:
        for session in sessions:
            await session.close()


def split_outcomes(outcomes):
    successes = [outcome for outcome in outcomes if not isinstance(outcome, BaseException)]
    failures = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
    return successes, failures


@pytest.mark.race
class TestConcurrentDeposits:
    @pytest.mark.asyncio
    async def test_only_one_of_two_racing_deposits_lands(self, session_factory, factory):
        client = await factory.profile(CLIENT_ROLE, 5_000)
        contractor = await factory.profile(CONTRACTOR_ROLE, 0)
        await factory.job(await factory.contract(client, contractor), 40_000)

        outcomes = await run_concurrently(
            session_factory,
            [
                lambda service: service.deposit_balance(client.id, 60),
                lambda service: service.deposit_balance(client.id, 70),
            ],
        )

        successes, failures = split_outcomes(outcomes)
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], ConflictError)

        reloaded = await factory.reload(client.id)
        assert reloaded.balance_cents == 5_000 + successes[0].amount_cents
        assert reloaded.version == client.version + len(successes)

    @pytest.mark.asyncio
    async def test_retry_after_conflict_succeeds(self, session_factory, factory):
        client = await factory.profile(CLIENT_ROLE, 0)
        contractor = await factory.profile(CONTRACTOR_ROLE, 0)
        await factory.job(await factory.contract(client, contractor), 40_000)

        outcomes = await run_concurrently(
            session_factory,
            [
                lambda service: service.deposit_balance(client.id, 25),
                lambda service: service.deposit_balance(client.id, 25),
            ],
        )
        successes, failures = split_outcomes(outcomes)
        assert [type(exc) for exc in failures] == [ConflictError]

        async with session_factory() as session:
            retried = await PaymentService(SqlPaymentStore(session)).deposit_balance(client.id, 25)

        assert retried.balance_cents == 5_000
        assert retried.version == client.version + 2


@pytest.mark.race
class TestConcurrentPayments:
    @pytest.mark.asyncio
    async def test_same_job_is_paid_at_most_once(self, session_factory, factory, scenario):
        outcomes = await run_concurrently(
            session_factory,
            [
                lambda service: service.pay_job(scenario.job.id, scenario.client.id),
                lambda service: service.pay_job(scenario.job.id, scenario.client.id),
            ],
        )

        successes, failures = split_outcomes(outcomes)
        assert len(successes) == 1
        assert [type(exc) for exc in failures] == [ConflictError]
        assert (await factory.reload(scenario.client.id)).balance_cents == 80_000
        assert (await factory.reload(scenario.contractor.id)).balance_cents == 70_000
        assert (await factory.reload_job(scenario.job.id)).paid is True

    @pytest.mark.asyncio
    async def test_racing_payments_conserve_money(self, session_factory, factory, scenario):
        second_job = await factory.job(scenario.contract, 30_000)
        total_before = scenario.client.balance_cents + scenario.contractor.balance_cents

        outcomes = await run_concurrently(
            session_factory,
            [
                lambda service: service.pay_job(scenario.job.id, scenario.client.id),
                lambda service: service.pay_job(second_job.id, scenario.client.id),
            ],
        )

        successes, failures = split_outcomes(outcomes)
        assert len(successes) == 1
        assert [type(exc) for exc in failures] == [ConflictError]

        client = await factory.reload(scenario.client.id)
        contractor = await factory.reload(scenario.contractor.id)
        assert client.balance_cents + contractor.balance_cents == total_before
        assert client.balance_cents == 100_000 - successes[0].amount_cents
        assert client.version == scenario.client.version + 1
        paid = [(await factory.reload_job(job_id)).paid for job_id in (scenario.job.id, second_job.id)]
        assert sorted(paid) == [False, True]
