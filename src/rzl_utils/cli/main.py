"""RZL Utils CLI entry point.

Defines the top-level ``rzl-utils`` command (via Click-Extra), configures
logging for every invocation and registers the helper subcommands from
`rzl_utils.cli.commands`.

Notes
- The CLI version is sourced from `rzl_utils.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Command results go to stdout; logs and messages go to stderr.

Examples
    $ rzl-utils format-number 1234567.89
    $ rzl-utils -v uuid --uuid-version v7 --monotonic -n 3
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from rzl_utils import __version__
from rzl_utils.config import FLIGHT_RECORDER_CAPACITY_ENV, LOG_PATH_ENV, LOGGER_LEVELS_ENV
from rzl_utils.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .commands import COMMANDS
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

FLIGHT_RECORDER_ENV = "RZL_FLIGHT_RECORDER"  # pragma: no mutate
FORCE_FLUSH_ENV = "RZL_FORCE_FLUSH_FLIGHT_RECORDER"  # pragma: no mutate

HELP = """RZL Utils command-line interface.

    Everyday helpers for formatting numbers and currency, converting string
    cases, normalizing URL paths and generating random strings and
    identifiers, usable from shell scripts. Every command prints its result
    on stdout.
    """


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
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (logger names, timestamps and source paths on the console).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir("rzl-utils", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar=LOG_PATH_ENV,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar=FLIGHT_RECORDER_CAPACITY_ENV,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records (tunable via RZL_FLIGHT_RECORDER_CAPACITY) "
        "at DEBUG granularity, unaffected by -v/-q, and write them to --log-path "
        "when a WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=True,
    envvar=FLIGHT_RECORDER_ENV,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar=FORCE_FLUSH_ENV,
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
        "Set the MINIMUM LEVEL of specific LOGGERS (NAME=LEVEL) for both the "
        "console and the flight recorder. Repeatable (e.g. -L rzl_utils.config=INFO) "
        "or via RZL_LOGGER_LEVELS (comma/space list)."
    ),
    envvar=LOGGER_LEVELS_ENV,
    show_envvar=True,
)
@clickx.pass_context
def rzl_utils(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """RZL Utils command-line interface."""

    # 0) effective console verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False
    handlers.append(config_console_handler(level=level, debug_mode=debug, color=use_color))

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    rzl_utils.add_command(_command)
