"""INTERACTOR run commands: ``perform``, ``rollback`` and ``show``.

Behavior
- ``REF`` is ``package.module:Name``; the module is imported with
  ``--app-dir`` (default: the current directory) at the front of ``sys.path``.
- Context data comes from ``--data-file`` (a JSON object) and repeated
  ``-d KEY=VALUE`` items, applied in that order.
- The resulting context goes to **stdout** (a table, or JSON with ``--json``);
  status lines go to **stderr**.

Exit codes
- ``0``: the context succeeded.
- ``1``: a step signaled failure (the organizer has already rolled back),
  or REF could not be loaded.
- ``2``: malformed data options (usage error).
- An exception raised by a step is not caught; it propagates with a traceback.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from interactor.errors import InteractorLoadError
from interactor.loader import load_interactor
from interactor.logging import log_outcome, log_target
from interactor.organizer import Organizer, step_name

from .helpers import error, parse_context_data, success, warn

if TYPE_CHECKING:
    from interactor.interactor import Interactor

logger = logging.getLogger(__name__)

FAILURE_EXIT_CODE = 1


# ============================================================================
#                               Helpers
# ============================================================================


def _load(reference: str, app_dir: Path) -> Any:
    app_dir_str = str(app_dir.resolve())
    if app_dir_str not in sys.path:
        sys.path.insert(0, app_dir_str)
    try:
        return load_interactor(reference)
    except InteractorLoadError as e:
        raise click.ClickException(str(e)) from e


def _build_data(data_file: IO[str] | None, data: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    if data_file is not None:
        try:
            loaded = json.load(data_file)
        except json.JSONDecodeError as e:
            raise click.BadParameter(
                f"not valid JSON ({e})", param_hint="--data-file"
            ) from e
        if not isinstance(loaded, dict):
            raise click.BadParameter(
                "must contain a JSON object", param_hint="--data-file"
            )
        merged.update(loaded)
    merged.update(data)
    return merged


def _render(result: Interactor, as_json: bool, color: bool | None) -> None:
    performed = (
        [step_name(unit) for unit in result.performed]
        if isinstance(result, Organizer)
        else []
    )

    if as_json:
        payload = {
            "success": result.success,
            "context": dict(result.context),
            "performed": performed,
        }
        click.echo(json.dumps(payload, indent=2, default=repr))
        return

    console = Console(no_color=color is False, highlight=False)
    table = Table(title=f"{type(result).__name__} context")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in result.context.items():
        table.add_row(Text(str(key)), Text(repr(value)))
    console.print(table)
    if performed:
        console.print(Text("Performed: " + " → ".join(performed)))


def _report(result: Interactor, action: str) -> None:
    ctx = click.get_current_context()
    name = type(result).__name__
    if result.failure:
        error(f"{name} failed during {action}.")
        ctx.exit(FAILURE_EXIT_CODE)
    success(f"{name} {action} succeeded.")


# ============================================================================
#                               Shared options
# ============================================================================


def _run_options(fn):
    fn = click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print the resulting context as JSON on stdout.",
    )(fn)
    fn = click.option(
        "--app-dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Directory prepended to sys.path before importing REF.",
    )(fn)
    fn = click.option(
        "--data-file",
        type=click.File("r", encoding="utf-8"),
        help="JSON file holding an object of initial context data.",
    )(fn)
    fn = click.option(
        "-d",
        "--data",
        "data",
        multiple=True,
        callback=parse_context_data,
        metavar="KEY=VALUE",
        help=(
            "Initial context value (repeatable). VALUE is decoded as JSON when "
            "possible, otherwise kept as a string."
        ),
    )(fn)
    return click.argument("reference", metavar="REF")(fn)


# ============================================================================
#                               Commands
# ============================================================================


@click.command()
@_run_options
@click.pass_context
def perform(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    reference: str,
    data: dict[str, Any],
    data_file: IO[str] | None,
    app_dir: Path,
    as_json: bool,
) -> None:
    """Perform the interactor or organizer REF with the given context data."""
    target = _load(reference, app_dir)
    context_data = _build_data(data_file, data)
    log_target(logger, "perform", reference, target)
    result = target.run(context_data)
    log_outcome(logger, "perform", result)
    _render(result, as_json, ctx.color)
    _report(result, "perform")


@click.command()
@_run_options
@click.pass_context
def rollback(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    reference: str,
    data: dict[str, Any],
    data_file: IO[str] | None,
    app_dir: Path,
    as_json: bool,
) -> None:
    """Roll back the interactor REF with the given context data.

    A freshly built organizer has performed nothing, so rolling one back
    from the command line has no effect.
    """
    target = _load(reference, app_dir)
    if getattr(target, "interactors", ()):
        warn(f"{step_name(target)} is an organizer; a fresh instance has nothing to roll back.")
    context_data = _build_data(data_file, data)
    log_target(logger, "rollback", reference, target)
    result = target.run_rollback(context_data)
    log_outcome(logger, "rollback", result)
    _render(result, as_json, ctx.color)
    _report(result, "rollback")


def _add_steps(tree: Tree, unit: Any) -> None:
    for step in getattr(unit, "interactors", ()):
        _add_steps(tree.add(step_name(step)), step)


@click.command()
@click.argument("reference", metavar="REF")
@click.option(
    "--app-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory prepended to sys.path before importing REF.",
)
@click.pass_context
def show(ctx: click.Context, reference: str, app_dir: Path) -> None:
    """Show the steps REF performs, in order, including nested organizers."""
    target = _load(reference, app_dir)
    log_target(logger, "show", reference, target)
    tree = Tree(Text(step_name(target), style="bold"))
    _add_steps(tree, target)
    Console(no_color=ctx.color is False, highlight=False).print(tree)
