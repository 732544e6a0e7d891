"""Resolve ``module:Attr`` references to interactor types.

Used by the CLI to locate the interactor or organizer to run, in the same
``package.module:object`` form used by console-script entry points.
"""

import importlib
import logging
from functools import reduce
from typing import Any

from .errors import InteractorLoadError

logger = logging.getLogger(__name__)


def load_interactor(reference: str) -> Any:
    """Import and return the interactor named by ``reference``.

    Args:
        reference: ``"package.module:ClassName"``. The attribute part may be
            dotted (``"pkg.mod:Outer.Inner"``).

    Returns:
        The referenced object. It is guaranteed to expose ``run`` and
        ``run_rollback``.

    Raises:
        InteractorLoadError: If the reference is malformed, the module cannot
            be imported, the attribute does not exist, or the object is not an
            interactor.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise InteractorLoadError(reference, "expected the form 'package.module:Name'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InteractorLoadError(reference, f"cannot import {module_name!r} ({e})") from e

    try:
        target = reduce(getattr, attr_path.split("."), module)
    except AttributeError as e:
        raise InteractorLoadError(
            reference, f"{module_name!r} has no attribute {attr_path!r}"
        ) from e

    if not (hasattr(target, "run") and hasattr(target, "run_rollback")):
        raise InteractorLoadError(reference, f"{target!r} is not an interactor")

    logger.debug("Loaded %s from %s", attr_path, module_name)
    return target
