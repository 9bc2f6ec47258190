import pytest
from sqlalchemy.orm import sessionmaker

from nova_mobility.db import make_engine
from nova_mobility.models import Base
from nova_mobility.seed import seed_all


@pytest.fixture()
def engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = make_engine(f"sqlite+pysqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def SessionLocal(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seeded_session(db_session):
    seed_all(db_session)
    return db_session
