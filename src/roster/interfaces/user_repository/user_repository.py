"""Interface for fetching and persisting users, independent of storage technology."""

import abc

from roster.domain import User


class UserRepository(abc.ABC):
    """Storage-agnostic access to `User` records.

    Any subclass can be handed to the service layer without code changes.
    """

    @abc.abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """Look up a user by identifier.

        Args:
            user_id (int): The ID of the user.

        Returns:
            User: The stored user.

        Raises:
            UserNotFoundError: If no user exists with this ID.
        """

    @abc.abstractmethod
    def save(self, user: User) -> None:
        """Persist a user.

        On first save the implementation assigns a durable ID and makes it
        visible through `user.id`. Saving a user that was already persisted is
        implementation-defined.

        Args:
            user (User): The user to persist. May be mutated.
        """
