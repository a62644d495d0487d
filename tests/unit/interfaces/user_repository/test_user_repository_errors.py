"""Test cases for the UserRepository errors."""

from roster.interfaces.user_repository import (
    StorageFailureError,
    UserNotFoundError,
    UserRepositoryError,
)


class TestUserNotFoundError:
    """Tests for the UserNotFoundError error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the attributes are set correctly."""
        error = UserNotFoundError(7)

        assert error.user_id == 7

    @staticmethod
    def test_message() -> None:
        """Test that the error message is formatted correctly."""
        assert str(UserNotFoundError(7)) == "User with ID 7 not found."

    @staticmethod
    def test_is_repository_error() -> None:
        """Callers can catch every repository error through the base class."""
        assert isinstance(UserNotFoundError(7), UserRepositoryError)


class TestStorageFailureError:
    """Tests for the StorageFailureError error."""

    @staticmethod
    def test_keeps_original_exception() -> None:
        """The store's exception is available unchanged on `cause`."""
        original = RuntimeError("connection reset by peer")

        error = StorageFailureError(original)

        assert error.cause is original

    @staticmethod
    def test_message_is_original_message() -> None:
        """The message is the store's message, verbatim."""
        error = StorageFailureError(RuntimeError("connection reset by peer"))

        assert str(error) == "connection reset by peer"

    @staticmethod
    def test_is_repository_error_but_not_not_found() -> None:
        """Storage failures are a distinct kind from missing records."""
        error = StorageFailureError(RuntimeError("boom"))

        assert isinstance(error, UserRepositoryError)
        assert not isinstance(error, UserNotFoundError)
