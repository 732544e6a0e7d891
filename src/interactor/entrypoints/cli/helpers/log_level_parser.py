"""Click callback for ``-L NAME=LEVEL`` logger-level options.

Items may be repeated on the command line or given as one comma/space
separated string (as they arrive from the ``INTERACTOR_LOGGER_LEVEL``
environment variable). Later items override earlier ones.
"""

import logging
import re

import click

from interactor.config import DEFAULT_LOGGER_LEVELS

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a plain string or a sequence of strings into non-empty items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _level_from_name(level_str: str) -> int:
    level = logging.getLevelNamesMapping().get(level_str.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_str}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a logger-name → numeric-level mapping.

    The result starts from `DEFAULT_LOGGER_LEVELS` and applies every item
    in order.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _split_items(value or ()):
        name, sep, level_str = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _level_from_name(level_str)
    return levels
