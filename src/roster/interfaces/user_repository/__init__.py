"""User repository interface and related errors."""

from .errors import StorageFailureError, UserNotFoundError, UserRepositoryError
from .user_repository import UserRepository

__all__ = [
    "StorageFailureError",
    "UserNotFoundError",
    "UserRepository",
    "UserRepositoryError",
]
