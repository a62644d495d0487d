"""Errors raised by UserRepository implementations."""


class UserRepositoryError(Exception):
    """Base class for UserRepository errors."""


class UserNotFoundError(UserRepositoryError):
    """Raised when no user exists for the requested ID.

    Every implementation raises this same error for a missing record, so
    callers never need to know which backend is active.

    Attributes:
        user_id (int): The ID that was looked up.
    """

    def __init__(self, user_id: int):
        super().__init__(f"User with ID {user_id} not found.")
        self.user_id = user_id


class StorageFailureError(UserRepositoryError):
    """Raised when the backing store fails for any reason other than a missing row.

    The original exception is kept untouched on `cause` (and chained as
    `__cause__` when raised with ``from``).

    Attributes:
        cause (Exception): The exception raised by the store client.
    """

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause
