"""SQLAlchemy-backed UserRepository.

Runs one parameterized statement per operation against the `users` table
(see adapters.user_repository.schema) on the connection it was given.
It never commits, rolls back or retries; the owner of the connection decides
the transaction mode.

Errors:
    - A SELECT that returns no row raises `UserNotFoundError`, as does an ID
      outside the signed 64-bit range, which no backend can have generated.
    - Any DB-API error, or a value the driver cannot bind (an integer too
      large for the column, a string with unpaired surrogates), is re-raised
      as `StorageFailureError` with the original exception kept on `cause`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import DBAPIError

from roster.domain import User
from roster.interfaces.user_repository import (
    StorageFailureError,
    UserNotFoundError,
    UserRepository,
)

from .schema import users

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)

MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

# Drivers raise the last two while binding, before SQLAlchemy can wrap them.
STORE_ERRORS = (DBAPIError, OverflowError, UnicodeEncodeError)


class SqlAlchemyUserRepository(UserRepository):
    """UserRepository backed by a relational database through SQLAlchemy Core.

    IDs are generated by the database on insert and written back to the
    saved `User`.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_by_id(self, user_id: int) -> User:
        if not MIN_ID <= user_id <= MAX_ID:
            raise UserNotFoundError(user_id)

        stmt = select(users.c.id, users.c.name, users.c.email).where(
            users.c.id == user_id
        )
        try:
            row = self.connection.execute(stmt).one_or_none()
        except STORE_ERRORS as e:
            raise StorageFailureError(e) from e

        if row is None:
            raise UserNotFoundError(user_id)
        return User(id=row.id, name=row.name, email=row.email)

    def save(self, user: User) -> None:
        stmt = (
            insert(users)
            .values(name=user.name, email=user.email)
            .returning(users.c.id)
        )
        try:
            new_id = self.connection.execute(stmt).scalar_one()
        except STORE_ERRORS as e:
            raise StorageFailureError(e) from e

        user.id = int(new_id)
        logger.debug("Inserted user %s", user.id)
