"""Paper repository implementation backed by SQLAlchemy Core."""

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError

from .interfaces import PaperQueryError, PaperRecord, PaperRepositoryPort
from .tables import papers_table


class SQLAlchemyPaperRepository(PaperRepositoryPort):
    """Read-only paper repository."""

    def __init__(self, engine: Engine):
        """Initialize paper repository.

        Args:
            engine: SQLAlchemy engine used for reads.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_paper_find_all(self, limit: int) -> list[PaperRecord]:
        """List papers ordered by newest creation timestamp and id.

        Args:
            limit: Max rows to return.

        Returns:
            list[PaperRecord]: Up to `limit` paper rows.

        Raises:
            ValueError: Raised when limit is not positive.
            PaperQueryError: Raised when the query fails.
        """

        if limit < 1:
            raise ValueError("limit must be >= 1")

        statement = (
            select(
                papers_table.c.paper_id,
                papers_table.c.title,
                papers_table.c.authors,
                papers_table.c.abstract,
                papers_table.c.doi,
                papers_table.c.published_on,
                papers_table.c.created_at_utc,
            )
            .order_by(papers_table.c.created_at_utc.desc(), papers_table.c.paper_id)
            .limit(limit)
        )
        try:
            with self._engine.connect() as connection:
                rows = connection.execute(statement).all()
        except SQLAlchemyError as error:
            raise PaperQueryError(f"paper query failed: {error}") from error

        return [_paper_record_from_row(row) for row in rows]


def _paper_record_from_row(row) -> PaperRecord:
    return PaperRecord(
        paper_id=row.paper_id,
        title=row.title,
        authors=row.authors,
        abstract=row.abstract,
        doi=row.doi,
        published_on=row.published_on,
        created_at_utc=row.created_at_utc,
    )
