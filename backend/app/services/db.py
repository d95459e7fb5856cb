"""
Database configuration and session management for the overlap backend.

This module defines a SQLModel engine targeting a SQLite database stored
in the backend's ``storage`` directory.  The location can be overridden
with the ``OVERLAP_DB_URL`` environment variable (any SQLAlchemy URL),
which is mostly useful for tests and deployments that keep data
elsewhere.  Keeping this configuration here isolates it from the
analysis code in other modules.
"""

from __future__ import annotations

import os
from pathlib import Path
from sqlmodel import SQLModel, create_engine, Session

# ``backend/storage`` relative to this file.  Created on import so the
# default SQLite file can always be opened.
STORAGE_DIR = Path(__file__).resolve().parents[2] / "storage"
STORAGE_DIR.mkdir(parents=True, exist_ok=True)

DEFAULT_DB_URL = f"sqlite:///{(STORAGE_DIR / 'overlap.db').as_posix()}"
DB_URL = os.getenv("OVERLAP_DB_URL") or DEFAULT_DB_URL

engine = create_engine(DB_URL, echo=False)


def create_db_and_tables() -> None:
    """Create all tables in the database.

    Safe to call repeatedly; existing tables are left untouched.
    """
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    """Return a new SQLModel session bound to the engine.

    Use it as a context manager (``with get_session() as session: ...``)
    so connections are closed when the block exits.
    """
    return Session(engine)
