"""
Classification of database errors raised while inserting rows.
"""
from typing import Optional

from psycopg2 import errorcodes
from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: Exception, constraint: Optional[str] = None) -> bool:
    """
    Check whether an error is a unique-constraint violation.

    The decision is made from the driver's error code, never from the message.

    Args:
        error: The exception raised by SQLAlchemy
        constraint: Optional constraint name the violation must refer to.
            Only PostgreSQL reports constraint names; SQLite violations match
            on the error code alone.

    Returns:
        True if the error is a unique violation (of ``constraint`` when given)
    """
    if not isinstance(error, IntegrityError):
        return False

    orig = error.orig

    # psycopg2
    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None:
        if pgcode != errorcodes.UNIQUE_VIOLATION:
            return False
        if constraint is None:
            return True
        diag = getattr(orig, "diag", None)
        return getattr(diag, "constraint_name", None) == constraint

    # sqlite3 exposes the extended result code name
    return getattr(orig, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE"
