"""Repository provider owning typed repositories and their shared storage link."""

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from papers_api.observability import observability_get_logger

from .connection import SQLAlchemyStorageConnection
from .interfaces import (
    PaperRepositoryPort,
    RepositoryCloseError,
    RepositoryInitializationError,
    RepositoryProviderPort,
)
from .paper_repository import SQLAlchemyPaperRepository
from .tables import papers_table

logger = observability_get_logger(__name__)


class SQLAlchemyRepositoryProvider(RepositoryProviderPort):
    """Builds repositories on a connected storage link and closes them together."""

    def __init__(self, storage_connection: SQLAlchemyStorageConnection):
        """Initialize repository provider.

        Args:
            storage_connection: Storage link shared by all repositories.

        Raises:
            ValueError: Raised when storage_connection is None.
        """

        if storage_connection is None:
            raise ValueError("storage_connection must not be None")
        self._storage_connection = storage_connection
        self._paper_repository: PaperRepositoryPort | None = None

    def db_initialize(self) -> None:
        """Verify the schema and build the paper repository.

        Raises:
            RepositoryInitializationError: Raised when storage is not connected or schema is missing.
        """

        if not self._storage_connection.db_is_connected():
            raise RepositoryInitializationError("storage connection must be open before repository initialization")

        engine = self._storage_connection.db_engine()
        try:
            papers_table_exists = inspect(engine).has_table(papers_table.name)
        except SQLAlchemyError as error:
            raise RepositoryInitializationError(f"schema inspection failed: {error}") from error
        if not papers_table_exists:
            raise RepositoryInitializationError(
                f"table `{papers_table.name}` is missing; apply database migrations first"
            )

        self._paper_repository = SQLAlchemyPaperRepository(engine=engine)
        logger.debug("repositories initialized", tables=[papers_table.name])

    def db_get_paper_repository(self) -> PaperRepositoryPort:
        """Return the paper repository.

        Returns:
            PaperRepositoryPort: Initialized paper repository.

        Raises:
            RuntimeError: Raised when called before initialization or after close.
        """

        if self._paper_repository is None:
            raise RuntimeError("repository provider is not initialized")
        return self._paper_repository

    def db_close(self) -> None:
        """Drop repositories and disconnect the shared storage link.

        Raises:
            RepositoryCloseError: Raised when the storage link cannot be released.
        """

        self._paper_repository = None
        try:
            self._storage_connection.db_disconnect()
        except SQLAlchemyError as error:
            raise RepositoryCloseError(f"storage disconnect failed: {error}") from error
