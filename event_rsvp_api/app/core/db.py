"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
applying migrations on application start (``init_db``).  Each
function receives the database location explicitly; the value comes
from ``Settings.database_url``.

The three collections of the service (``admin``, ``event`` and
``participation``) are plain tables.  The participation table carries
the unique index on ``(event_id, participant_name, email)`` that
backs the one-sign-up-per-person rule.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS admin (
            id TEXT PRIMARY KEY,
            password_hash TEXT NOT NULL,
            name TEXT NOT NULL,
            member_since TIMESTAMP NOT NULL,
            session_refresh_token TEXT,
            session_expires_at TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS event (
            id TEXT PRIMARY KEY,
            date DATE NOT NULL,
            created_at TIMESTAMP NOT NULL,
            name TEXT NOT NULL,
            editor TEXT NOT NULL,
            detail TEXT,
            category TEXT
        );
        CREATE INDEX IF NOT EXISTS idx_event_date ON event(date);

        CREATE TABLE IF NOT EXISTS participation (
            id TEXT PRIMARY KEY,
            event_id TEXT NOT NULL,
            participant_name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone_number TEXT,
            comment TEXT,
            created_at TIMESTAMP NOT NULL,
            FOREIGN KEY(event_id) REFERENCES event(id) ON DELETE CASCADE
        );
        CREATE UNIQUE INDEX IF NOT EXISTS idx_participation_unique
            ON participation(event_id, participant_name, email);
        """,
    ),
    # Migration 2: look up sessions by refresh token
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_admin_session_token ON admin(session_refresh_token);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Resolve ``database_url`` to an absolute SQLite file path."""
    if os.path.isabs(database_url):
        return database_url
    return os.path.abspath(database_url)


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_url: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits on success and closes the connection."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_url: str) -> None:
    """Create the database if needed and apply pending migrations."""
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
