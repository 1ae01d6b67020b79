"""Typed interfaces for database-layer collaborators.

All SQL and ORM access must remain in the db package and its submodules.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID


class StorageConnectionError(ConnectionError):
    """Raised when the storage backend cannot be reached."""


class RepositoryInitializationError(RuntimeError):
    """Raised when repository capabilities cannot be prepared."""


class RepositoryCloseError(RuntimeError):
    """Raised when repository resources cannot be released cleanly."""


class PaperQueryError(RuntimeError):
    """Raised when a paper read query fails."""


@dataclass(frozen=True)
class PaperRecord:
    """Persistence model for one paper row.

    Attributes:
        paper_id: Unique paper identifier.
        title: Paper title.
        authors: Author list as stored text.
        abstract: Optional abstract text.
        doi: Optional DOI reference.
        published_on: Optional publication date.
        created_at_utc: Persistence row creation timestamp in UTC.
    """

    paper_id: UUID
    title: str
    authors: str
    abstract: str | None
    doi: str | None
    published_on: date | None
    created_at_utc: datetime


class StorageConnectionPort(Protocol):
    """Port definition for the live link to the persistence backend."""

    def db_connect(self) -> None:
        """Open the backend link and verify it with a round trip.

        Raises:
            StorageConnectionError: Raised when the backend cannot be reached.
        """

    def db_is_connected(self) -> bool:
        """Return the cached connectivity state without performing I/O.

        Returns:
            bool: Whether the last connect succeeded and no disconnect followed.
        """

    def db_disconnect(self) -> None:
        """Release the backend link. Safe to call more than once."""


class PaperRepositoryPort(Protocol):
    """Port definition for paper reads."""

    def db_paper_find_all(self, limit: int) -> list[PaperRecord]:
        """List papers ordered newest first.

        Args:
            limit: Max rows to return.

        Returns:
            list[PaperRecord]: Up to `limit` paper rows.

        Raises:
            ValueError: Raised when limit is not positive.
            PaperQueryError: Raised when the query fails.
        """


class RepositoryProviderPort(Protocol):
    """Port definition for the owner of typed repository capabilities."""

    def db_initialize(self) -> None:
        """Prepare repository capabilities on top of a connected storage link.

        Raises:
            RepositoryInitializationError: Raised when preparation fails.
        """

    def db_get_paper_repository(self) -> PaperRepositoryPort:
        """Return the paper repository capability.

        Returns:
            PaperRepositoryPort: Initialized paper repository.

        Raises:
            RuntimeError: Raised when called before initialization.
        """

    def db_close(self) -> None:
        """Release repository resources and the underlying storage link.

        Raises:
            RepositoryCloseError: Raised when resources cannot be released.
        """
