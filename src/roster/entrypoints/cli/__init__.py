"""The ``roster`` command-line interface."""

from .main import roster

__all__ = ["roster"]
