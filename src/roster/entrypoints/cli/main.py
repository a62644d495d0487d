"""ROSTER CLI entry point.

Defines the top-level ``roster`` command (via Click-Extra), configures logging
from the global options, and registers the subcommands.

Currently available groups
- ``roster users``: create and look up users.

Examples
    $ roster --version
    $ roster users create --name Alice --email alice@example.com
    $ roster -v users get 1
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roster import __version__
from roster.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .users import users as users_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10


HELP = """ROSTER command-line interface.

    Store and look up users in the database named by ROSTER_DB_URL.
    """


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """Shift the WARNING default one level per -v/-q, clamped to DEBUG..CRITICAL."""
    level = BASE_LEVEL - (LEVEL_STEP * verbose_count) + (LEVEL_STEP * quiet_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG level with timestamps and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=Path(user_log_dir("roster", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ROSTER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="ROSTER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING or ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on a clean exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level for specific loggers (NAME=LEVEL). Applies to "
        "both console and flight recorder. Repeatable, or set "
        "ROSTER_LOGGER_LEVELS to a comma/space separated list."
    ),
    envvar="ROSTER_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def roster(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROSTER command-line interface."""

    level = effective_level(verbose_count, quiet_count)

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


roster.add_command(users_group)
