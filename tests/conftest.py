"""Shared pytest fixtures for SQLite-backed storage tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from sqlalchemy import create_engine, insert

from papers_api.db import db_metadata, papers_table


@pytest.fixture
def sqlite_database_url(tmp_path: Path) -> str:
    """Return a URL for an empty file-backed SQLite database.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        str: SQLAlchemy SQLite URL.
    """

    return f"sqlite+pysqlite:///{tmp_path / 'papers.db'}"


@pytest.fixture
def papers_database_url(sqlite_database_url: str) -> str:
    """Return a URL for a SQLite database with the papers schema applied.

    Args:
        sqlite_database_url: Empty SQLite database URL.

    Returns:
        str: SQLAlchemy SQLite URL with the `papers` table created.
    """

    engine = create_engine(sqlite_database_url)
    try:
        db_metadata.create_all(engine)
    finally:
        engine.dispose()
    return sqlite_database_url


def seed_papers(database_url: str, count: int) -> list[UUID]:
    """Insert `count` papers with strictly increasing creation timestamps.

    Args:
        database_url: Target database URL.
        count: Number of rows to insert.

    Returns:
        list[UUID]: Inserted ids, newest first.
    """

    base_created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
    rows = [
        {
            "paper_id": uuid4(),
            "title": f"Paper {index}",
            "authors": "Ada Lovelace, Alan Turing",
            "abstract": None,
            "doi": f"10.1000/{index}",
            "published_on": date(2025, 1, 1) + timedelta(days=index),
            "created_at_utc": base_created_at + timedelta(minutes=index),
        }
        for index in range(count)
    ]
    engine = create_engine(database_url)
    try:
        with engine.begin() as connection:
            if rows:
                connection.execute(insert(papers_table), rows)
    finally:
        engine.dispose()
    return [row["paper_id"] for row in reversed(rows)]
