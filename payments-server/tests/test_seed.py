from contextlib import asynccontextmanager

import pytest

import init_seed
from jobpay.modules.accounts import AccountService


class TrackingSessionFactory:
    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self):
        self.opened += 1
        try:
            async with self._session_factory() as session:
                yield session
        finally:
            self.closed += 1


@pytest.mark.asyncio
async def test_seed_runs_once_and_closes_its_sessions(monkeypatch, session_factory, capsys):
    tracker = TrackingSessionFactory(session_factory)

    async def skip_init_db():
        return None

    monkeypatch.setattr(init_seed, "get_session_factory", lambda: tracker)
    monkeypatch.setattr(init_seed, "init_db", skip_init_db)

    await init_seed.seed()
    await init_seed.seed()

    assert tracker.opened == tracker.closed == 2
    assert "already exist" in capsys.readouterr().out
    async with session_factory() as session:
        profiles = await AccountService.with_session(session).list_accounts()
    assert len(profiles) == len(init_seed.PROFILES)
