"""INTERACTOR CLI entry point.

Defines the top-level ``interactor`` command (via Click-Extra), configures
console logging for every subcommand, and registers the subcommands.

Commands
- ``interactor perform REF``: run an interactor or organizer with data.
- ``interactor rollback REF``: roll an interactor back with data.
- ``interactor show REF``: print an organizer's configured steps.

Logging
- Console verbosity starts at WARNING; each ``-v`` lowers it one level and
  each ``-q`` raises it. ``-vv`` shows the organizer's per-step trail.
- ``-L NAME=LEVEL`` sets one logger's own level, e.g. to quiet the engine
  while keeping an application's step loggers verbose.

Examples
    $ interactor --version
    $ interactor -v perform shop.orders:PlaceOrder -d cart_id=42
"""

import logging

import click
import click_extra as clickx

from interactor import __version__
from interactor.config import LOGGER_LEVEL_ENVVAR
from interactor.logging import config_console_handler, log_startup

from .commands import perform, rollback, show
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """INTERACTOR command-line interface.

    Run single-responsibility interactors and organizers from the shell. An
    organizer performs its steps in order against one shared context and, when
    a step signals failure, rolls back the completed steps in reverse order.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Examples:', fg='blue', bold=True, underline=True)}",
        "  interactor perform shop.orders:PlaceOrder -d cart_id=42",
        "  interactor perform shop.orders:PlaceOrder -d cart_id=42 --json",
        "  interactor -vv -L shop=WARNING perform shop.orders:PlaceOrder",
        "  interactor show shop.orders:PlaceOrder",
    ]
)


@clickx.extra_group(
    name="interactor",
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
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
    help=(
        "Show every record with timestamps, logger names and source "
        "locations (implies DEBUG console verbosity)."
    ),
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the MINIMUM LEVEL of specific LOGGERS (NAME=LEVEL). Use it to quiet "
        "the engine's step trail or your own step loggers. Repeatable "
        "(e.g. -L interactor.organizer=INFO -L myapp=WARNING)."
    ),
    envvar=LOGGER_LEVEL_ENVVAR,
    show_envvar=True,
)
@clickx.pass_context
def cli(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """INTERACTOR command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler filters; the root logger passes everything
    use_color = ctx.color is not False  # None or True => allow color
    handler = config_console_handler(level=level, debug_mode=debug, color=use_color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    # 2) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        debug_mode=debug,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


cli.add_command(perform)
cli.add_command(rollback)
cli.add_command(show)
