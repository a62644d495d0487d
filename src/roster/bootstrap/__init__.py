"""Bootstrap (composition root) for ROSTER.

Wires concrete adapters into the service layer. Entry points import this
package rather than `roster.adapters`; inner layers must not import it.
No business rules live here.
"""

from .bootstrap import build_user_repository, open_user_service

__all__ = ["build_user_repository", "open_user_service"]
