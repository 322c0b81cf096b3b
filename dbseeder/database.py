from contextlib import contextmanager
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
import time
import logging

from .config import settings

# Configure logging
logger = logging.getLogger(__name__)

# Create base class for models
Base = declarative_base()


def build_database_url(
    host=None, port=None, user=None, password=None, dbname=None, sslmode=None
):
    """Build the PostgreSQL URL from individual connection options.

    Any option left as None falls back to the configured default.
    """
    return URL.create(
        "postgresql+psycopg2",
        username=user if user is not None else settings.DB_USER,
        password=password if password is not None else settings.DB_PASSWORD,
        host=host if host is not None else settings.DB_HOST,
        port=port if port is not None else settings.DB_PORT,
        database=dbname if dbname is not None else settings.DB_NAME,
        query={"sslmode": sslmode if sslmode is not None else settings.DB_SSLMODE},
    )


def create_db_engine(database_url):
    """Create a SQLAlchemy engine for the given URL (string or URL object)."""
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # A single shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs = {
            "pool_size": 5,  # Maximum number of connections to keep
            "max_overflow": 10,  # Maximum number of connections that can be created beyond pool_size
            "pool_timeout": 30,  # Timeout for getting a connection from the pool
            "pool_recycle": 1800,  # Recycle connections after 30 minutes
            "pool_pre_ping": True,  # Test connections with a ping before using
            "poolclass": QueuePool,
        }

    engine = create_engine(url, **engine_kwargs)

    # Add event listeners for connection issues
    @event.listens_for(engine, "connect")
    def connect(dbapi_connection, connection_record):
        if engine.dialect.name == "sqlite":
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.info("Database connection established")

    @event.listens_for(engine, "checkout")
    def checkout(dbapi_connection, connection_record, connection_proxy):
        logger.debug("Database connection checked out from pool")

    @event.listens_for(engine, "checkin")
    def checkin(dbapi_connection, connection_record):
        logger.debug("Database connection returned to pool")

    return engine


def create_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(engine):
    """Create all tables that do not exist yet.

    Safe to call repeatedly; existing tables are left untouched.
    """
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("All tables created successfully")


# Open a DB session with retry logic
@contextmanager
def get_db(session_factory, max_retries=None, retry_delay=None):
    max_retries = max(1, max_retries if max_retries is not None else settings.DB_CONNECT_RETRIES)
    retry_delay = retry_delay if retry_delay is not None else settings.DB_RETRY_DELAY

    last_exc = None

    for attempt in range(1, max_retries + 1):
        db = None
        try:
            db = session_factory()
            # validate connection
            db.execute(text("SELECT 1"))
        except Exception as e:
            # failed to create/validate session, close if open and maybe retry
            if db is not None:
                db.close()
            last_exc = e
            if attempt < max_retries:
                logger.warning(
                    "Database connection failed (attempt %d/%d): %s. Retrying in %s seconds.",
                    attempt, max_retries, str(e), retry_delay * (2 ** (attempt - 1))
                )
                time.sleep(retry_delay * (2 ** (attempt - 1)))
                continue
            logger.error("Database connection failed after %d attempts: %s", max_retries, str(e))
            raise
        else:
            try:
                yield db
            finally:
                db.close()
            return

    if last_exc:
        raise last_exc
