"""Error definitions for the interactor package.

Signaled failure (``Context.fail``) is ordinary control flow and is never
represented by an exception. The classes below cover misuse of the API.
"""

# ============================================================================
#                           General errors
# ============================================================================


class InteractorError(Exception):
    """Base class for errors raised by the interactor package."""


# ============================================================================
#                           Context errors
# ============================================================================


class ContextKeyError(InteractorError, KeyError):
    """Raised when reading a key that is not present in a context."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Key {key!r} is not present in the context")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


# ============================================================================
#                           Organizer errors
# ============================================================================


class OrganizerConfigurationError(InteractorError):
    """Raised when an organizer's interactor sequence is declared incorrectly."""


# ============================================================================
#                           Loader errors
# ============================================================================


class InteractorLoadError(InteractorError):
    """Raised when a ``module:Attr`` reference cannot be resolved."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"Cannot load {reference!r}: {reason}")
        self.reference = reference
        self.reason = reason
