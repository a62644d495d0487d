"""Build a UserService backed by the configured database."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from roster import config
from roster.adapters.db.engine import make_engine
from roster.adapters.user_repository import SqlAlchemyUserRepository
from roster.service_layer import UserService

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

    from roster.interfaces.user_repository import UserRepository

logger = logging.getLogger(__name__)


def build_user_repository(connection: Connection) -> UserRepository:
    """Build the production repository on an open connection."""
    return SqlAlchemyUserRepository(connection)


@contextmanager
def open_user_service(url: str | None = None) -> Iterator[UserService]:
    """Yield a UserService bound to a fresh database connection.

    The connection runs in AUTOCOMMIT mode, so every repository statement is
    durable on its own. The connection is closed and the engine disposed when
    the context exits.

    Args:
        url: SQLAlchemy database URL. Defaults to `config.get_db_url()`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `ROSTER_DB_URL` is unset.
    """
    engine = make_engine(url if url is not None else config.get_db_url())
    try:
        with engine.connect() as connection:
            connection.execution_options(isolation_level="AUTOCOMMIT")
            logger.debug("Opened %s connection", engine.dialect.name)
            yield UserService(build_user_repository(connection))
    finally:
        engine.dispose()
