import logging

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import OperationalError

from dbseeder import cli, database
from dbseeder.cli import build_parser, main, seed_steps
from dbseeder.database import create_db_engine, create_session_factory
from dbseeder.models import Address, Category, Order, OrderItem, Product, ProductImage, Review, User
from tests.helpers import count_rows

ZERO_COUNTS = [
    "--users", "0",
    "--addresses-per-user", "0",
    "--categories", "0",
    "--products", "0",
    "--orders", "0",
    "--reviews", "0",
]


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'seed.db'}"


@pytest.fixture
def open_db(database_url):
    engines = []

    def _open():
        engine = create_db_engine(database_url)
        engines.append(engine)
        return create_session_factory(engine)()

    yield _open
    for engine in engines:
        engine.dispose()


def test_end_to_end_seed(database_url, open_db):
    exit_code = main([
        "--database-url", database_url,
        "seed",
        "--users", "10",
        "--addresses-per-user", "2",
        "--categories", "9",
        "--category-depth", "2",
        "--products", "20",
        "--images-per-product", "1",
        "--orders", "5",
        "--max-items-per-order", "3",
        "--reviews", "10",
        "--seed", "42",
    ])

    assert exit_code == 0
    db = open_db()
    assert count_rows(db, User) == 10
    assert count_rows(db, Address) == 20
    assert db.scalar(select(func.count()).select_from(Address).where(Address.is_default)) == 10
    assert count_rows(db, Category) == 9
    assert db.scalar(select(func.count()).select_from(Category).where(Category.parent_id.is_(None))) == 3
    assert count_rows(db, Product) == 20
    assert count_rows(db, ProductImage) == 20
    assert count_rows(db, Order) == 5
    assert 5 <= count_rows(db, OrderItem) <= 15
    assert count_rows(db, Review) <= 10
    pairs = db.execute(select(Review.product_id, Review.user_id)).all()
    assert len(pairs) == len(set(pairs))
    db.close()


def test_all_flag_runs_every_step(database_url, open_db):
    exit_code = main(["--database-url", database_url, "seed", "--all", *ZERO_COUNTS])

    assert exit_code == 0
    db = open_db()
    # Categories always get at least one top-level entry
    assert count_rows(db, Category) == 1
    assert count_rows(db, User) == 0
    db.close()


def test_generator_failure_exits_non_zero(database_url, open_db):
    args = ["--database-url", database_url, "seed", *ZERO_COUNTS, "--users", "3", "--products", "5"]

    assert main(args) == 1

    db = open_db()
    # Rows from steps that already ran stay in place
    assert count_rows(db, User) == 3
    assert count_rows(db, Product) == 0
    db.close()


def test_connection_failure_exits_non_zero(tmp_path, monkeypatch):
    monkeypatch.setattr(database.time, "sleep", lambda _seconds: None)
    unreachable = f"sqlite:///{tmp_path / 'missing' / 'seed.db'}"

    assert main(["--database-url", unreachable, "seed", "--users", "1"]) == 1


def test_schema_failure_exits_non_zero(database_url, open_db, monkeypatch):
    def failing_create_tables(engine):
        raise OperationalError("CREATE TABLE", {}, Exception("permission denied"))

    monkeypatch.setattr(cli, "create_tables", failing_create_tables)

    assert main(["--database-url", database_url, "seed", "--users", "1"]) == 1

    db = open_db()
    # No step runs once the schema cannot be created
    assert inspect(db.get_bind()).get_table_names() == []
    db.close()


def test_random_seed_is_logged(database_url, caplog):
    caplog.set_level(logging.INFO, logger="dbseeder.cli")

    assert main(["--database-url", database_url, "seed", *ZERO_COUNTS, "--seed", "42"]) == 0

    assert "Random seed: 42" in caplog.text


def test_seed_steps_order():
    args = build_parser().parse_args(["seed", "--users", "5", "--orders", "0", "--reviews", "2"])

    assert [name for name, _ in seed_steps(args)] == [
        "users", "addresses", "categories", "products", "reviews",
    ]


def test_addresses_need_users():
    args = build_parser().parse_args(["seed", *ZERO_COUNTS, "--addresses-per-user", "3"])

    assert seed_steps(args) == []


def test_defaults():
    args = build_parser().parse_args(["seed"])

    assert args.host == "localhost"
    assert args.port == 5433
    assert args.users == 100
    assert args.addresses_per_user == 2
    assert args.categories == 30
    assert args.category_depth == 3
    assert args.products == 1000
    assert args.images_per_product == 3
    assert args.orders == 500
    assert args.max_items_per_order == 5
    assert args.reviews == 300
    assert args.all is False


def test_negative_count_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["seed", "--users", "-1"])


def test_subcommand_is_required():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])

    assert excinfo.value.code == 2


@pytest.mark.parametrize("flag", ["--category-depth", "--max-items-per-order"])
def test_zero_depth_or_items_is_rejected(flag):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["seed", flag, "0"])

    assert excinfo.value.code == 2
