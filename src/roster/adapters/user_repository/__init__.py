"""Concrete implementations of the UserRepository interface."""

from .in_memory import InMemoryUserRepository
from .sqlalchemy_repository import SqlAlchemyUserRepository

__all__ = [
    "InMemoryUserRepository",
    "SqlAlchemyUserRepository",
]
