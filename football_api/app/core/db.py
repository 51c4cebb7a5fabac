"""
SQLite database integration.

This module provides the connection factory (``get_connection``), the
``transaction`` context manager used by every service call, and
``init_db`` which creates the schema on application start.

Each service call runs inside exactly one ``transaction()``: the
connection is committed when the block exits normally and rolled back
when an exception escapes, so exists-then-write sequences (create,
roster mutation, transfer) are all-or-nothing.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)

# Budgets are exact decimals in Python; SQLite stores them with NUMERIC
# affinity so ORDER BY budget compares numerically.
sqlite3.register_adapter(Decimal, str)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the ``football_api`` package.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # football_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  Foreign keys are switched on for the connection; SQLite
    leaves them off by default, which would disable the
    ``ON DELETE CASCADE`` from players to teams.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    # SQLite's LOWER() only folds ASCII; positions like "Défenseur" need Unicode folding.
    conn.create_function("ulower", 1, _unicode_lower, deterministic=True)
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Yield a connection wrapped in a single transaction.

    The write lock is taken up front with ``BEGIN IMMEDIATE`` so the
    existence checks made before a write see the same state as the write.
    """
    conn = get_connection()
    try:
        conn.execute("BEGIN IMMEDIATE")
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS equipes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nom VARCHAR(100) NOT NULL UNIQUE,
            acronyme VARCHAR(10) NOT NULL UNIQUE,
            budget NUMERIC(15, 2) NOT NULL CHECK (budget >= 0)
        );

        CREATE TABLE IF NOT EXISTS joueurs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nom VARCHAR(100) NOT NULL UNIQUE,
            position VARCHAR(50) NOT NULL,
            equipe_id INTEGER,
            FOREIGN KEY(equipe_id) REFERENCES equipes(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_joueurs_equipe_id ON joueurs(equipe_id);
        """,
    ),
]


def init_db() -> None:
    """Create the schema if needed.

    Applied versions are recorded in the ``migrations`` table; only
    versions newer than the recorded maximum are executed, so calling
    this on every startup is safe.
    """
    with transaction() as conn:
        conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                conn.executescript(sql)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied database migration %s", version)
                current_version = version
