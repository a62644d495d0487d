"""Service layer for ROSTER.

Implements application use-cases on top of the interfaces in
`roster.interfaces`.

Dependency rule: may import `roster.domain` and `roster.interfaces`, but not
`roster.adapters` or `roster.entrypoints`.
"""

from .user_service import UserService

__all__ = ["UserService"]
