"""
Statement execution for the relational store.

Every call checks a connection out of the Flask-SQLAlchemy engine, runs its
statement(s) in one transaction, logs them, and gives the connection back
before returning. Rows are copied into plain dicts first so nothing returned
depends on an open cursor.
"""

import logging
import sqlite3
from collections import namedtuple

from psycopg2 import errorcodes
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from todos import db
from todos.store.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

QueryResult = namedtuple('QueryResult', ['rows', 'rowcount'])


def is_unique_violation(error):
    """
    True if an IntegrityError came from a UNIQUE constraint.

    Uses the driver's error code: psycopg2 sets pgcode, sqlite3 sets
    sqlite_errorcode.
    """
    orig = getattr(error, 'orig', None)
    if getattr(orig, 'pgcode', None) == errorcodes.UNIQUE_VIOLATION:
        return True
    return getattr(orig, 'sqlite_errorcode', None) == sqlite3.SQLITE_CONSTRAINT_UNIQUE


def _log_query(statement, params):
    logger.info(f"{' '.join(statement.split())} {params}")


def _run(conn, statement, params):
    _log_query(statement, params)
    result = conn.execute(text(statement), params)
    rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
    return QueryResult(rows=rows, rowcount=result.rowcount)


def db_query_all(*queries):
    """
    Run (statement, params) pairs on one connection inside one transaction.

    Returns a QueryResult per statement, in order. A unique-constraint
    violation is raised as DuplicateKeyError; any other database error
    propagates unchanged and the transaction is rolled back.
    """
    try:
        with db.engine.begin() as conn:
            return [_run(conn, statement, params) for statement, params in queries]
    except IntegrityError as e:
        if is_unique_violation(e):
            raise DuplicateKeyError(str(e.orig)) from e
        raise


def db_query(statement, **params):
    """Run a single parameterized statement and return its QueryResult."""
    return db_query_all((statement, params))[0]
