"""Adapters (infrastructure) for ROSTER.

Concrete implementations of the interfaces in `roster.interfaces`: the
in-memory and SQLAlchemy user repositories, plus table metadata and engine
construction.

Dependency rule: may import `roster.domain` and `roster.interfaces`; neither
of those may import this package.
"""
