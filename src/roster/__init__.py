"""ROSTER

A small user directory built around the repository pattern: data access sits
behind an abstract contract so business logic can run against an in-memory
store in tests and a relational database in production.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
