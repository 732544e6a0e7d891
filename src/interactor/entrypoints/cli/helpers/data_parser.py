"""Click callback for ``-d KEY=VALUE`` context data options.

Each value is decoded as JSON when it parses (``-d count=3`` gives the int 3,
``-d tags='["a","b"]'`` a list) and is otherwise kept as the raw string
(``-d name=Ada``). Use JSON quoting to force a string: ``-d zip='"02134"'``.
"""

import json
from typing import Any

import click


def _decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_context_data(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, Any]:
    """Parse repeated KEY=VALUE items into a dict; later keys win.

    Raises:
        click.BadParameter: If an item has no ``=`` or an empty key.
    """
    data: dict[str, Any] = {}
    for item in value or ():
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        data[key.strip()] = _decode(raw)
    return data
