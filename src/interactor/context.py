"""Shared, mutable state passed through an interactor run.

A `Context` is an ordinary ``dict`` (insertion ordered, keyed by name) with a
one-way failure flag attached. Every step of an organizer run receives the
*same* context object, so a value written by one step is visible to every
step that follows it, and to the caller once the run returns.

Reading a key that was never written is an error at the point of access:

    >>> ctx = Context.build({"user_id": 7})
    >>> ctx["user_id"]
    7
    >>> ctx["order"]
    Traceback (most recent call last):
        ...
    interactor.errors.ContextKeyError: Key 'order' is not present in the context

Use ``ctx.get(key, default)`` or ``key in ctx`` for a non-raising check.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ContextKeyError


class Context(dict[str, Any]):
    """Keyed data plus a failure flag that never reverts once set.

    Equality compares data only, as for any ``dict``; the failure flag is
    reported through `success` and `failure`.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._failed = False

    @classmethod
    def build(
        cls, initial: Mapping[str, Any] | None = None, /, **data: Any
    ) -> Context:
        """Build a context from an initial key/value set.

        Args:
            initial: Initial data. When this is already a `Context`, that same
                instance is returned (not a copy) so callers can share it.
            **data: Additional keys merged on top of ``initial``.

        Returns:
            The new (or reused) context.
        """
        if isinstance(initial, Context):
            initial.update(data)
            return initial
        return cls(initial or {}, **data)

    def __missing__(self, key: str) -> Any:
        raise ContextKeyError(key)

    # --- Failure signaling ---

    def fail(self, **updates: Any) -> None:
        """Merge ``updates`` into the context and mark it as failed.

        Marking an already failed context is a no-op on the flag; the
        updates are still merged.
        """
        self.update(updates)
        self._failed = True

    @property
    def success(self) -> bool:
        """Whether no step has signaled failure."""
        return not self._failed

    @property
    def failure(self) -> bool:
        """Whether a step has signaled failure."""
        return self._failed

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)}, failure={self._failed})"
