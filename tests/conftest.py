"""Global pytest fixtures and hooks for INTERACTOR."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> marker every test collected under it receives.
FOLDER_MARKERS = {
    "unit": pytest.mark.unit,
    "functional": pytest.mark.functional,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the layer its folder belongs to."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        marker = FOLDER_MARKERS.get(folder)
        if marker and item.get_closest_marker(marker.name) is None:
            item.add_marker(marker)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo logging configuration done by CLI invocations.

    The CLI attaches a Rich console handler to the root logger and sets
    per-logger levels; drop that handler and restore the levels so one test's
    verbosity flags do not leak into the next.
    """
    root = logging.getLogger()
    root_level = root.level
    levels = {
        name: lg.level
        for name, lg in logging.root.manager.loggerDict.items()
        if isinstance(lg, logging.Logger)
    }
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(root_level)
    for name, lg in logging.root.manager.loggerDict.items():
        if isinstance(lg, logging.Logger):
            lg.setLevel(levels.get(name, logging.NOTSET))
