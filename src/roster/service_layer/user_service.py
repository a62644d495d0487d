"""User use-cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.domain import User
    from roster.interfaces.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Get and create users through an injected UserRepository.

    The service only knows the abstract repository, so an in-memory store
    and a database-backed one are interchangeable. Repository errors
    propagate unchanged.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def get_user(self, user_id: int) -> User:
        """Return the user with the given ID.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        logger.debug("Fetching user %s", user_id)
        return self.repository.find_by_id(user_id)

    def create_user(self, user: User) -> None:
        """Persist a new user; its `id` reflects the stored identifier afterwards."""
        logger.debug("Creating user %r", user.name)
        self.repository.save(user)
