"""Configuration utilities for ROSTER.

Configuration comes from the environment; there is no config file.
"""

import os

DB_URL_ENV_VAR = "ROSTER_DB_URL"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the ROSTER_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `ROSTER_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `ROSTER_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url
