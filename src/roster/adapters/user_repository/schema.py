"""Table definition for persisted users.

The table is not created or migrated by ROSTER; deployments provide it.
Tests build it from this definition with ``metadata.create_all``.
"""

from __future__ import annotations

from sqlalchemy import Column, Identity, Integer, String, Table

from roster.adapters.db.metadata import metadata

__all__ = ["users"]

users = Table(
    "users",
    metadata,
    # Postgres: INTEGER GENERATED BY DEFAULT AS IDENTITY
    # SQLite: rowid alias (primary_key=True is sufficient)
    Column(
        "id",
        Integer,
        Identity(start=1),
        primary_key=True,
        comment="Store-generated user identifier.",
    ),
    # VARCHAR without a length limit on every backend
    Column("name", String(), nullable=False, comment="Display name."),
    Column("email", String(), nullable=False, comment="Email address."),
    comment="One row per user.",
)
