"""Storage connection backed by a SQLAlchemy engine."""

from sqlalchemy import Engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from papers_api.observability import observability_get_logger

from .interfaces import StorageConnectionError, StorageConnectionPort
from .session import db_create_engine

logger = observability_get_logger(__name__)


class SQLAlchemyStorageConnection(StorageConnectionPort):
    """Process-owned storage link with a cached connectivity flag."""

    def __init__(self, database_url: str, connect_timeout_seconds: int | None = None):
        """Initialize the storage connection without touching the network.

        Args:
            database_url: SQLAlchemy database URL.
            connect_timeout_seconds: Optional driver connect timeout.

        Raises:
            ValueError: Raised when the database URL is blank.
        """

        if not database_url.strip():
            raise ValueError("database_url must not be blank")
        self._database_url = database_url
        self._connect_timeout_seconds = connect_timeout_seconds
        self._engine: Engine | None = None
        self._connected = False

    def db_connection_label(self) -> str:
        """Return the target database URL for diagnostics.

        Returns:
            str: Database URL with the password masked.
        """

        return make_url(self._database_url).render_as_string(hide_password=True)

    def db_connect(self) -> None:
        """Create the engine and verify connectivity with `SELECT 1`.

        Raises:
            StorageConnectionError: Raised when the connectivity check fails.
        """

        if self._connected:
            return

        engine = db_create_engine(self._database_url, connect_timeout_seconds=self._connect_timeout_seconds)
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as error:
            engine.dispose()
            raise StorageConnectionError(f"database connectivity check failed: {error}") from error

        self._engine = engine
        self._connected = True
        logger.debug("storage connection established", target=self.db_connection_label())

    def db_is_connected(self) -> bool:
        """Return the cached connectivity flag.

        Returns:
            bool: Whether the storage link is open.
        """

        return self._connected

    def db_engine(self) -> Engine:
        """Return the live engine.

        Returns:
            Engine: Connected SQLAlchemy engine.

        Raises:
            RuntimeError: Raised when the connection is not open.
        """

        if not self._connected or self._engine is None:
            raise RuntimeError("storage connection is not open; call db_connect() first")
        return self._engine

    def db_disconnect(self) -> None:
        """Dispose the engine pool and mark the connection closed."""

        engine = self._engine
        self._engine = None
        self._connected = False
        if engine is not None:
            engine.dispose()
            logger.debug("storage connection disposed")
