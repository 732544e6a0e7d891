"""INTERACTOR

Single-responsibility actions with compensating rollback. Interactors share a
mutable context, can signal failure, and can be composed into organizers that
run them in order and undo completed work when a step fails.
"""

from .context import Context
from .errors import (
    ContextKeyError,
    InteractorError,
    InteractorLoadError,
    OrganizerConfigurationError,
)
from .interactor import Interactor
from .organizer import Organizer, OrganizerState

__all__ = [
    "__version__",
    "Context",
    "ContextKeyError",
    "Interactor",
    "InteractorError",
    "InteractorLoadError",
    "Organizer",
    "OrganizerConfigurationError",
    "OrganizerState",
]
__version__ = "0.1.0"
