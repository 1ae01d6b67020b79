"""SQLAlchemy Core table definitions for the papers schema."""

import sqlalchemy as sa

db_metadata = sa.MetaData()

papers_table = sa.Table(
    "papers",
    db_metadata,
    sa.Column("paper_id", sa.Uuid(), primary_key=True),
    sa.Column("title", sa.Text(), nullable=False),
    sa.Column("authors", sa.Text(), nullable=False, server_default=sa.text("''")),
    sa.Column("abstract", sa.Text(), nullable=True),
    sa.Column("doi", sa.Text(), nullable=True),
    sa.Column("published_on", sa.Date(), nullable=True),
    sa.Column(
        "created_at_utc",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    ),
    sa.Index("ix_papers_created_at_utc", "created_at_utc"),
)
