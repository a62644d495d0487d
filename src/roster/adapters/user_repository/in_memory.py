"""In-memory implementation of the UserRepository interface."""

from __future__ import annotations

from roster.domain import User
from roster.interfaces.user_repository import UserNotFoundError, UserRepository


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed UserRepository for tests.

    Does not assign identifiers: `save` stores the user under whatever `id`
    the caller put on it. Setting `error` makes every operation raise that
    exception, before any lookup and without touching `users`.

    Attributes:
        users: The store, keyed by user ID.
        error: Exception to raise from every operation, or None.
    """

    def __init__(
        self,
        users: dict[int, User] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.users: dict[int, User] = users if users is not None else {}
        self.error = error

    def find_by_id(self, user_id: int) -> User:
        if self.error is not None:
            raise self.error
        if (user := self.users.get(user_id)) is None:
            raise UserNotFoundError(user_id)
        return user

    def save(self, user: User) -> None:
        if self.error is not None:
            raise self.error
        self.users[user.id] = user
