"""Database layer package for all SQL and persistence boundaries."""

from .connection import SQLAlchemyStorageConnection
from .interfaces import (
    PaperQueryError,
    PaperRecord,
    PaperRepositoryPort,
    RepositoryCloseError,
    RepositoryInitializationError,
    RepositoryProviderPort,
    StorageConnectionError,
    StorageConnectionPort,
)
from .paper_repository import SQLAlchemyPaperRepository
from .provider import SQLAlchemyRepositoryProvider
from .session import db_create_engine
from .tables import db_metadata, papers_table

__all__ = [
    "PaperQueryError",
    "PaperRecord",
    "PaperRepositoryPort",
    "RepositoryCloseError",
    "RepositoryInitializationError",
    "RepositoryProviderPort",
    "SQLAlchemyPaperRepository",
    "SQLAlchemyRepositoryProvider",
    "SQLAlchemyStorageConnection",
    "StorageConnectionError",
    "StorageConnectionPort",
    "db_create_engine",
    "db_metadata",
    "papers_table",
]
