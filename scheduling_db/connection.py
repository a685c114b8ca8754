# /scheduling_db/connection.py

import configparser
import logging
import os
import sys
from contextlib import contextmanager

import mysql.connector

logger = logging.getLogger(__name__)


class DatabaseUnavailable(Exception):
    """Raised when no connection to the scheduling database can be opened."""


# Errors a gateway turns into a failed QueryResult.
DB_ERRORS = (mysql.connector.Error, DatabaseUnavailable)


def get_base_path():
    """ Get the correct base path whether running as a script or a frozen exe."""
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    else:
        # For a script, go up one level from /scheduling_db
        return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


# --- Configuration Setup ---
def get_config_path():
    return os.environ.get('SCHEDULING_DB_CONFIG') or os.path.join(get_base_path(), 'config.ini')


def load_config(path=None):
    """Reads the INI configuration file. A missing file yields an empty config."""
    parser = configparser.ConfigParser()
    parser.read(path or get_config_path(), encoding='utf-8')
    return parser


config = load_config()


def get_db_config():
    """Returns the connection arguments from the [database] section."""
    if not config.has_section('database'):
        raise DatabaseUnavailable(f"No [database] section found in {get_config_path()}")
    section = config['database']
    try:
        db_config = dict(
            host=section['host'],
            user=section['user'],
            password=section['password'],
            database=section['database'],
            port=section.getint('port', 3306),
            charset=section.get('charset', 'utf8mb4'),
            use_pure=True
        )
    except KeyError as err:
        raise DatabaseUnavailable(f"Missing database setting: {err}") from err
    if section.get('collation'):
        db_config['collation'] = section['collation']
    return db_config


# --- Shared Database Connection ---
_connection = None


def get_connection():
    """Returns the process-wide connection, opening it on first use."""
    global _connection
    if _connection is not None:
        if _connection.is_connected():
            return _connection
        try:
            _connection.close()
        except mysql.connector.Error:
            logger.warning("Closing stale connection failed", exc_info=True)
        _connection = None

    db_config = get_db_config()
    try:
        _connection = mysql.connector.connect(**db_config)
    except mysql.connector.Error as err:
        _connection = None
        raise DatabaseUnavailable(f"Error connecting to database: {err}") from err
    logger.info("Connected to database %s on %s.", db_config['database'], db_config['host'])
    return _connection


def close_connection():
    """Closes the shared connection if one is open."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None


@contextmanager
def get_cursor():
    """
    Provides a fresh dictionary cursor on the shared connection.
    Commits on success, rolls back on error, and always closes the cursor.
    """
    conn = get_connection()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        try:
            conn.rollback()
        except mysql.connector.Error:
            logger.warning("Rollback failed", exc_info=True)
        raise
    finally:
        cur.close()
