"""Console logging for the ``interactor`` command line.

Library modules only create loggers with ``logging.getLogger(__name__)``.
This module is what the CLI uses to put their records on screen, and to
narrate a run: the reference that was loaded, the steps it will perform and
how the run ended.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from .organizer import Organizer, step_name

if TYPE_CHECKING:
    from logging import Logger

    from .interactor import Interactor

# pylint: disable=too-few-public-methods

PACKAGE = "interactor"

# Keep consistent with click-extra's --color / --no-color option
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class OriginFilter(logging.Filter):
    """Tag each record with the package that logged it.

    Engine records get an empty ``record.origin``. Records from application
    steps, or any other library, get the first component of their logger name
    in brackets (``"[orders]"`` for ``orders.steps.charge``), so step output
    stands apart from the organizer's own lines.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.origin = "" if top == PACKAGE else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    Args:
        level: Minimum level shown (DEBUG in debug mode regardless).
        debug_mode: Show timestamps, logger names and source locations
            instead of origin tags.
        color: Allow colored output.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(origin)s %(message)s"))
        handler.addFilter(OriginFilter())
    return handler


def step_lines(target: Any, depth: int = 0) -> list[str]:
    """List the configured steps of ``target``, nested organizers expanded.

    Each line is indented two spaces per nesting level. A plain interactor
    has no steps.
    """
    lines: list[str] = []
    for step in getattr(target, "interactors", ()):
        lines.append("  " * depth + step_name(step))
        lines.extend(step_lines(step, depth + 1))
    return lines


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    debug_mode: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log the console level at INFO and interpreter details at DEBUG."""
    logger.info(
        "INTERACTOR %s: console=%s%s",
        app_version,
        logging.getLevelName(logging.DEBUG if debug_mode else level),
        ", debug mode" if debug_mode else "",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug(
        "Per-logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )


def log_target(logger: Logger, action: str, reference: str, target: Any) -> None:
    """Log which interactor is about to run and, at DEBUG, its step outline."""
    top_level = getattr(target, "interactors", ())
    if top_level:
        logger.info(
            "%s %s: organizer with %d step(s)", action, reference, len(top_level)
        )
        for line in step_lines(target):
            logger.debug("step %s", line)
    else:
        logger.info("%s %s: interactor", action, reference)


def log_outcome(logger: Logger, action: str, result: Interactor) -> None:
    """Log how a run ended and, at DEBUG, the keys left in its context."""
    status = "failed" if result.failure else "succeeded"
    if isinstance(result, Organizer):
        logger.info(
            "%s %s %s (%s) after %s",
            type(result).__name__,
            action,
            status,
            result.state.value,
            [step_name(step) for step in result.performed] or "no steps",
        )
    else:
        logger.info("%s %s %s", type(result).__name__, action, status)
    logger.debug("Context keys: %s", sorted(result.context))
