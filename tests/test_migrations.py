from pathlib import Path

import pytest
from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config
from alembic.migration import MigrationContext
from sqlalchemy import inspect

from nova_mobility.db import make_engine
from nova_mobility.models import Base

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture()
def migrated_engine(tmp_path):
    engine = make_engine(f"sqlite+pysqlite:///{tmp_path / 'migrated.db'}")
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
    yield engine, config
    engine.dispose()


def test_migration_matches_models(migrated_engine):
    engine, _ = migrated_engine

    with engine.connect() as connection:
        diff = compare_metadata(MigrationContext.configure(connection), Base.metadata)

    assert diff == []


def test_migration_downgrades_to_empty(migrated_engine):
    engine, config = migrated_engine

    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.downgrade(config, "base")

    assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
