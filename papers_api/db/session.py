"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url


def db_create_engine(database_url: str, connect_timeout_seconds: int | None = None) -> Engine:
    """Create the SQLAlchemy engine for application database access.

    Args:
        database_url: SQLAlchemy database URL.
        connect_timeout_seconds: Optional driver connect timeout.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    connect_args: dict[str, object] = {}
    if connect_timeout_seconds is not None:
        backend_name = make_url(database_url).get_backend_name()
        if backend_name == "postgresql":
            connect_args["connect_timeout"] = connect_timeout_seconds
        elif backend_name == "sqlite":
            connect_args["timeout"] = connect_timeout_seconds

    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
