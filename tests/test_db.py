from sqlalchemy import inspect, text

from nova_mobility import db as db_module
from nova_mobility.db import create_schema, drop_schema, get_db, make_engine
from nova_mobility.models import Base


def test_sqlite_foreign_keys_enabled(engine):
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_get_db_closes_session(monkeypatch, SessionLocal):
    monkeypatch.setattr(db_module, "SessionLocal", SessionLocal)

    gen = get_db()
    session = next(gen)
    assert session.execute(text("SELECT 1")).scalar() == 1
    gen.close()

    assert not session.in_transaction()


def test_create_and_drop_schema(tmp_path):
    engine = make_engine(f"sqlite+pysqlite:///{tmp_path / 'schema.db'}")
    try:
        create_schema(engine)
        assert set(inspect(engine).get_table_names()) == set(Base.metadata.tables)
        assert len(Base.metadata.tables) == 32

        drop_schema(engine)
        assert inspect(engine).get_table_names() == []
    finally:
        engine.dispose()
