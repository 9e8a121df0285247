"""SQLAlchemy Core table definitions for the subsctl database.

Instants are stored as ISO 8601 text in UTC; the repository converts them
to and from timezone-aware datetimes.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

subscriptions = Table(
    "subscriptions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("name", Text, nullable=False),
    Column("provider", Text, nullable=False),  # Provider enum name
    Column("expiration_date", Text, nullable=False),
    Column("status", Text, nullable=False),
    sqlite_autoincrement=True,
)

Index("ix_subscriptions_user_id", subscriptions.c.user_id)
Index("ix_subscriptions_status", subscriptions.c.status)
