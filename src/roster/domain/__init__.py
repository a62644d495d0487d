"""Domain model for ROSTER.

Plain data records with no knowledge of storage. Nothing in this package may
import from `roster.adapters`, `roster.service_layer` or `roster.entrypoints`.
"""

from .user import User

__all__ = ["User"]
