"""
Read-only SQLite connection to the lexical database.
Loads the database location from environment variables.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Union

from dotenv import load_dotenv

from lexilookup.db.schema import REQUIRED_TABLES
from lexilookup.errors import SchemaMismatch, StorageUnavailable

load_dotenv()

logger = logging.getLogger(__name__)

DB_FILENAME = "Dictionary.db"


def get_db_config() -> dict:
    """Get database configuration from environment variables."""
    base_dir = Path(__file__).parent.parent.parent
    return {
        "db_path": os.getenv(
            "DICTIONARY_DB_PATH", str(base_dir / "data" / DB_FILENAME)
        ),
    }


def get_connection_string(db_path: Union[str, Path]) -> str:
    """Get a read-only, shared-cache SQLite URI for the database file."""
    uri = Path(db_path).resolve().as_uri()
    return f"{uri}?mode=ro&cache=shared"


def open_connection(db_path: Union[str, Path]) -> sqlite3.Connection:
    """
    Open a read-only connection, failing fast if the file is missing or is
    not a SQLite database.
    """
    path = Path(db_path)
    if not path.is_file():
        raise StorageUnavailable(f"Database file not found at {path}")

    try:
        conn = sqlite3.connect(get_connection_string(path), uri=True)
    except sqlite3.Error as e:
        raise StorageUnavailable(f"Could not open database {path}: {e}") from e

    try:
        # sqlite3.connect is lazy; touching the catalog reads the file header
        conn.execute("PRAGMA schema_version").fetchone()
    except sqlite3.Error as e:
        conn.close()
        raise StorageUnavailable(f"Could not read database {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def connect(db_path: Union[str, Path]):
    """Get a short-lived read-only connection that is always closed."""
    conn = open_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()


def table_exists(conn: sqlite3.Connection, table: str) -> bool:
    """Check the catalog for a table (virtual FTS tables included)."""
    row = conn.execute(
        "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = ?",
        (table,),
    ).fetchone()
    return row[0] > 0


def verify_schema(
    conn: sqlite3.Connection, required_tables: Iterable[str] = REQUIRED_TABLES
) -> None:
    """Raise SchemaMismatch for the first required table that is missing."""
    for table in required_tables:
        if not table_exists(conn, table):
            raise SchemaMismatch(table)


def count_rows(conn: sqlite3.Connection, table: str) -> int:
    """Count rows in one of the known lexical tables."""
    # Identifiers can't be bound as parameters
    if table not in REQUIRED_TABLES:
        raise ValueError(f"Unknown table '{table}'")
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
