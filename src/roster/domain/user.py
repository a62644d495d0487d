"""The User entity."""

from dataclasses import dataclass

UNSET_ID = 0


@dataclass
class User:
    """A user record.

    `id` is `UNSET_ID` until a repository persists the user; repositories that
    generate identifiers write the new value back into this instance.
    """

    name: str
    email: str
    id: int = UNSET_ID  # pylint: disable=invalid-name
