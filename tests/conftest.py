"""Global pytest fixtures for ROSTER."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from roster.domain import User

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
]


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["postgres_engine", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)


@pytest.fixture
def john() -> User:
    """The user seeded by most repository tests."""
    return User(id=1, name="John Doe", email="john.doe@example.com")


@pytest.fixture
def jane() -> User:
    """A user that is not in any store until a test saves it."""
    return User(id=2, name="Jane Doe", email="jane.doe@example.com")


TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = ("unit", "contract", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark every test with the suite directory it lives in (e.g. `unit`)."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        suite = relative.parts[0]
        if suite not in SUITE_MARKERS:
            continue
        if not any(marker.name == suite for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, suite))
