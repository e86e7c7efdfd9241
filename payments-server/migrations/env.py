"""Alembic environment for the jobpay schema (profiles, contracts, jobs)."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from jobpay.core.config import get_settings
from jobpay.db import models
from jobpay.infrastructure.database.session import get_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = models.Base.metadata


def _offline_url() -> str:
    # offline scripts are rendered with the sync driver
    return get_settings().database_url.replace("sqlite+aiosqlite", "sqlite", 1)


def _configure(**kwargs) -> None:
    url = get_settings().database_url
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most columns in place
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )


def run_offline() -> None:
    _configure(url=_offline_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run_with_connection)


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
