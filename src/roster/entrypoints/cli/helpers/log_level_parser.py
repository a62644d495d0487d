"""Parse ``NAME=LEVEL`` logger-level overrides given on the command line.

Values may be repeated (``-L a=INFO -L b=DEBUG``) or packed into one
comma/space separated string, as when read from ``ROSTER_LOGGER_LEVELS``.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the raw option value(s) into non-empty ``NAME=LEVEL`` items."""
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name → level mapping.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
