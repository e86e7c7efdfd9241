"""Compare-and-swap behaviour of the guard on top of the SQL store."""
from datetime import datetime, timezone

import pytest

from jobpay.infrastructure.database.repositories import SqlPaymentStore
from jobpay.modules.accounts import CLIENT_ROLE, CONTRACTOR_ROLE, Account
from jobpay.modules.payments import BalanceWrite, ConcurrencyGuard, JobPayment, StaleVersionError


@pytest.mark.asyncio
async def test_apply_bumps_version_once(session, factory):
    account = await factory.profile(CLIENT_ROLE, 1_000)
    guard = ConcurrencyGuard(SqlPaymentStore(session))

    version = await guard.apply(account.id, account.version, 1_500)

    assert version == account.version + 1
    reloaded = await factory.reload(account.id)
    assert reloaded.balance_cents == 1_500
    assert reloaded.version == account.version + 1


@pytest.mark.asyncio
async def test_apply_rejects_stale_version_without_writing(session, factory):
    account = await factory.profile(CLIENT_ROLE, 1_000)
    guard = ConcurrencyGuard(SqlPaymentStore(session))
    await guard.apply(account.id, account.version, 1_200)

    with pytest.raises(StaleVersionError) as excinfo:
        await guard.apply(account.id, account.version, 9_999)

    assert excinfo.value.entity == "profile"
    assert excinfo.value.entity_id == account.id
    reloaded = await factory.reload(account.id)
    assert reloaded.balance_cents == 1_200
    assert reloaded.version == account.version + 1


@pytest.mark.asyncio
async def test_apply_all_is_all_or_nothing(session, factory):
    first = await factory.profile(CLIENT_ROLE, 1_000)
    second = await factory.profile(CONTRACTOR_ROLE, 500)
    guard = ConcurrencyGuard(SqlPaymentStore(session))

    stale_second = BalanceWrite(second.id, second.version + 7, 600)
    with pytest.raises(StaleVersionError):
        await guard.apply_all([guard.stage(first, -100), stale_second])

    assert (await factory.reload(first.id)).balance_cents == 1_000
    assert (await factory.reload(first.id)).version == first.version
    assert (await factory.reload(second.id)).balance_cents == 500


@pytest.mark.asyncio
async def test_apply_all_rolls_back_balances_when_job_is_stale(session, factory, scenario):
    guard = ConcurrencyGuard(SqlPaymentStore(session))
    payment = JobPayment(job_id=scenario.job.id, expected_version=5, payment_date=datetime.now(timezone.utc))

    with pytest.raises(StaleVersionError) as excinfo:
        await guard.apply_all(
            [guard.stage(scenario.client, -20_000), guard.stage(scenario.contractor, 20_000)],
            payment,
        )

    assert excinfo.value.entity == "job"
    assert (await factory.reload(scenario.client.id)).balance_cents == 100_000
    assert (await factory.reload(scenario.contractor.id)).balance_cents == 50_000
    assert (await factory.reload_job(scenario.job.id)).paid is False


@pytest.mark.asyncio
async def test_apply_all_refuses_duplicate_accounts(session, factory):
    account = await factory.profile(CLIENT_ROLE, 1_000)
    guard = ConcurrencyGuard(SqlPaymentStore(session))

    with pytest.raises(ValueError):
        await guard.apply_all([guard.stage(account, -1), guard.stage(account, 1)])

    assert (await factory.reload(account.id)).version == account.version


def test_stage_computes_new_balance_from_snapshot():
    account = Account(id=3, first_name="A", last_name="B", profession="C", role=CLIENT_ROLE, balance_cents=700, version=4)
    write = ConcurrencyGuard.stage(account, -200)
    assert write == BalanceWrite(account_id=3, expected_version=4, new_balance_cents=500)
