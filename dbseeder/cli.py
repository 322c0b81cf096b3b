#!/usr/bin/env python3
"""
Command-line entry point for seeding the e-commerce database with fake data.

Usage:
    dbseeder [connection options] seed [counts] [--all] [--seed N]

Example:
    dbseeder --port 5432 seed --users 10 --products 50 --orders 20
    dbseeder --database-url sqlite:///seed.db seed --all
"""
import argparse
import logging
import random
import sys
import time

from sqlalchemy.exc import SQLAlchemyError

from .config import settings
from .database import build_database_url, create_db_engine, create_session_factory, create_tables, get_db
from .seeders import (
    SeedingError,
    generate_addresses,
    generate_categories,
    generate_orders,
    generate_products,
    generate_reviews,
    generate_users,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dbseeder",
        description="Generate and insert fake data into an e-commerce database.",
    )
    parser.add_argument("--host", default=settings.DB_HOST, help="Database host")
    parser.add_argument("--port", type=int, default=settings.DB_PORT, help="Database port")
    parser.add_argument("--user", default=settings.DB_USER, help="Database user")
    parser.add_argument("--password", default=settings.DB_PASSWORD, help="Database password")
    parser.add_argument("--dbname", default=settings.DB_NAME, help="Database name")
    parser.add_argument("--sslmode", default=settings.DB_SSLMODE, help="Database SSL mode")
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="Full SQLAlchemy URL, overrides the individual connection options",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed", help="Seed the database with fake data")
    seed.add_argument("--users", type=non_negative_int, default=settings.SEED_USERS,
                      help="Number of users to generate")
    seed.add_argument("--addresses-per-user", type=non_negative_int, default=settings.SEED_ADDRESSES_PER_USER,
                      help="Number of addresses per user")
    seed.add_argument("--categories", type=non_negative_int, default=settings.SEED_CATEGORIES,
                      help="Number of categories to generate")
    seed.add_argument("--category-depth", type=positive_int, default=settings.SEED_CATEGORY_DEPTH,
                      help="Maximum depth of category hierarchy")
    seed.add_argument("--products", type=non_negative_int, default=settings.SEED_PRODUCTS,
                      help="Number of products to generate")
    seed.add_argument("--images-per-product", type=non_negative_int, default=settings.SEED_IMAGES_PER_PRODUCT,
                      help="Number of images per product")
    seed.add_argument("--orders", type=non_negative_int, default=settings.SEED_ORDERS,
                      help="Number of orders to generate")
    seed.add_argument("--max-items-per-order", type=positive_int, default=settings.SEED_MAX_ITEMS_PER_ORDER,
                      help="Maximum number of items per order")
    seed.add_argument("--reviews", type=non_negative_int, default=settings.SEED_REVIEWS,
                      help="Number of reviews to generate")
    seed.add_argument("--all", action="store_true", help="Generate all types of data")
    seed.add_argument("--seed", type=int, default=None,
                      help="Random seed for reproducible data (defaults to the current time)")
    seed.set_defaults(func=run_seed)

    return parser


def seed_steps(args):
    """Return the (name, step) pairs to run, in dependency order."""
    steps = []

    if args.all or args.users > 0:
        steps.append(("users", lambda db, rng: generate_users(db, args.users, rng)))

    if args.all or (args.users > 0 and args.addresses_per_user > 0):
        steps.append(("addresses", lambda db, rng: generate_addresses(
            db, args.users, args.addresses_per_user, rng)))

    if args.all or args.categories > 0:
        steps.append(("categories", lambda db, rng: generate_categories(
            db, args.categories, args.category_depth, rng)))

    if args.all or args.products > 0:
        steps.append(("products", lambda db, rng: generate_products(
            db, args.products, args.images_per_product, rng)))

    if args.all or args.orders > 0:
        steps.append(("orders", lambda db, rng: generate_orders(
            db, args.orders, args.max_items_per_order, rng)))

    if args.all or args.reviews > 0:
        steps.append(("reviews", lambda db, rng: generate_reviews(db, args.reviews, rng)))

    return steps


def run_seed(args):
    if args.database_url:
        database_url = args.database_url
    else:
        database_url = build_database_url(
            host=args.host,
            port=args.port,
            user=args.user,
            password=args.password,
            dbname=args.dbname,
            sslmode=args.sslmode,
        )

    seed_value = args.seed if args.seed is not None else time.time_ns()
    rng = random.Random(seed_value)
    logger.info("Random seed: %d", seed_value)

    try:
        engine = create_db_engine(database_url)
    except SQLAlchemyError as e:
        logger.error("Invalid database URL: %s", e)
        return 1

    session_factory = create_session_factory(engine)

    try:
        with get_db(session_factory) as db:
            try:
                create_tables(engine)
            except SQLAlchemyError as e:
                logger.error("Failed to create tables: %s", e)
                return 1

            logger.info("E-Commerce Database Seeder")
            start_time = time.perf_counter()

            for name, step in seed_steps(args):
                logger.info("Seeding %s", name)
                try:
                    step(db, rng)
                except (SQLAlchemyError, SeedingError) as e:
                    logger.error("Failed to seed %s: %s", name, e)
                    return 1

            elapsed = time.perf_counter() - start_time
            logger.info("Seeding completed successfully!")
            logger.info("Total time: %.2fs", elapsed)
    except SQLAlchemyError as e:
        logger.error("Failed to connect to database: %s", e)
        return 1
    finally:
        engine.dispose()

    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
