"""CLI helpers for ROSTER.

URL sanitization for safe display, logger-level option parsing, and
stderr message emitters.
"""

from .db_url import sanitize_url
from .messages import success

__all__ = ["sanitize_url", "success"]
