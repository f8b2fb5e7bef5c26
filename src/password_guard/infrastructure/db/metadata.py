"""SQLAlchemy metadata definitions for credential-bearing tables."""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

accounts = sa.Table(
    "accounts",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("name", sa.Text(), nullable=True),
    sa.Column("password", sa.Text(), nullable=True),
)
