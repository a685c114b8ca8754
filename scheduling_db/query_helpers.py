# /scheduling_db/query_helpers.py

import logging

from .connection import DB_ERRORS, get_cursor
from .results import QueryResult

logger = logging.getLogger(__name__)


def fetch_all(sql, params=None, mapper=None):
    """Runs a SELECT and returns every row, mapped to a record type when given."""
    try:
        with get_cursor() as cur:
            cur.execute(sql, params or {})
            rows = cur.fetchall()
    except DB_ERRORS as err:
        logger.exception("Query failed: %s", err)
        return QueryResult.failed(err)
    if mapper is not None:
        rows = [mapper(row) for row in rows]
    return QueryResult.from_rows(rows)


def fetch_one(sql, params=None, mapper=None):
    """Runs a SELECT expected to match at most one row."""
    result = fetch_all(sql, params, mapper)
    if not result:
        return result if result.is_failed else QueryResult.empty()
    if len(result.value) > 1:
        logger.warning("Expected a single row but the query returned %d; using the first.", len(result.value))
    return QueryResult.ok(result.value[0])


def execute_write(sql, params):
    """Runs an UPDATE or DELETE and returns the number of affected rows."""
    try:
        with get_cursor() as cur:
            cur.execute(sql, params)
            affected = cur.rowcount
    except DB_ERRORS as err:
        logger.exception("Statement failed: %s", err)
        return QueryResult.failed(err)
    if affected > 0:
        logger.info("Rows affected: %d", affected)
        return QueryResult.ok(affected)
    logger.info("No change has occurred.")
    return QueryResult.empty(0)


def execute_insert(sql, params):
    """Runs an INSERT and returns the id of the new row."""
    try:
        with get_cursor() as cur:
            cur.execute(sql, params)
            new_id = cur.lastrowid
            affected = cur.rowcount
    except DB_ERRORS as err:
        logger.exception("Insert failed: %s", err)
        return QueryResult.failed(err)
    if affected > 0:
        logger.info("Rows affected: %d", affected)
        return QueryResult.ok(new_id)
    logger.info("No change has occurred.")
    return QueryResult.empty()
