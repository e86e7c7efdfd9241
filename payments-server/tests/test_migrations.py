import asyncio
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from jobpay.core.config import get_settings
from jobpay.infrastructure.database.session import dispose_engine

MIGRATIONS = Path(__file__).resolve().parents[1] / "migrations"


def test_upgrade_to_head_creates_payment_tables(tmp_path, monkeypatch):
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{db_path}")
    get_settings.cache_clear()
    asyncio.run(dispose_engine())

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS))
    try:
        command.upgrade(config, "head")
    finally:
        asyncio.run(dispose_engine())
        get_settings.cache_clear()

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        assert {"profiles", "contracts", "jobs", "alembic_version"} <= set(inspector.get_table_names())
        assert "version" in {column["name"] for column in inspector.get_columns("profiles")}
    finally:
        engine.dispose()
