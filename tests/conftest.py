import random

import pytest

from dbseeder.database import create_db_engine, create_session_factory, create_tables


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def rng():
    return random.Random(1234)


