import pytest
from sqlalchemy import inspect, text

from dbseeder import database
from dbseeder.database import build_database_url, create_db_engine, create_session_factory, create_tables, get_db

TABLES = {
    "users",
    "addresses",
    "categories",
    "products",
    "product_images",
    "orders",
    "order_items",
    "reviews",
}


def test_create_tables(engine):
    assert set(inspect(engine).get_table_names()) == TABLES


def test_create_tables_is_idempotent(engine):
    create_tables(engine)
    create_tables(engine)

    assert set(inspect(engine).get_table_names()) == TABLES


def test_review_pair_is_unique(engine):
    constraints = inspect(engine).get_unique_constraints("reviews")

    assert any(sorted(c["column_names"]) == ["product_id", "user_id"] for c in constraints)


def test_build_database_url():
    url = build_database_url(
        host="db.internal", port=5432, user="seed", password="p@ss", dbname="shop", sslmode="require"
    )

    assert url.drivername == "postgresql+psycopg2"
    assert url.host == "db.internal"
    assert url.port == 5432
    assert url.username == "seed"
    assert url.password == "p@ss"
    assert url.database == "shop"
    assert url.query["sslmode"] == "require"


def test_build_database_url_defaults():
    url = build_database_url()

    assert url.host == "localhost"
    assert url.port == 5433
    assert url.database == "shared_db"
    assert url.query["sslmode"] == "disable"


def test_get_db_yields_session(engine):
    with get_db(create_session_factory(engine)) as db:
        assert db.execute(text("SELECT 1")).scalar() == 1


def test_get_db_retries(engine, monkeypatch):
    sleeps = []
    monkeypatch.setattr(database.time, "sleep", sleeps.append)
    factory = create_session_factory(engine)
    attempts = {"count": 0}

    def flaky_factory():
        attempts["count"] += 1
        if attempts["count"] < 3:
            raise RuntimeError("database is starting up")
        return factory()

    with get_db(flaky_factory, max_retries=3, retry_delay=1) as db:
        assert db.execute(text("SELECT 1")).scalar() == 1

    assert attempts["count"] == 3
    assert sleeps == [1, 2]


def test_get_db_gives_up(monkeypatch):
    monkeypatch.setattr(database.time, "sleep", lambda _seconds: None)

    def broken_factory():
        raise RuntimeError("connection refused")

    with pytest.raises(RuntimeError, match="connection refused"):
        with get_db(broken_factory, max_retries=2, retry_delay=0):
            pass


def test_sqlite_file_engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'seed.db'}")
    create_tables(engine)

    assert set(inspect(engine).get_table_names()) == TABLES
    engine.dispose()
