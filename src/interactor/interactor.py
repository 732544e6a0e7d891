"""The interactor unit: one single-responsibility step bound to a context.

Subclasses override `Interactor.perform` (and, where the work can be undone,
`Interactor.rollback`). Either hook may call `Interactor.fail` to signal a
failure, which is how a step asks an enclosing organizer to stop and
compensate. Raising an exception is a different channel: it propagates to
the caller untouched.

Example:
    ```py
    class ChargeCard(Interactor):
        def perform(self):
            self.context["charge"] = gateway.charge(self.card, self.amount)

        def rollback(self):
            gateway.refund(self.charge)

    result = ChargeCard.run(card=card, amount=500)
    if result.failure:
        ...
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from .context import Context
from .errors import ContextKeyError

I = TypeVar("I", bound="Interactor")


class Interactor:
    """Base class for a step that acts on a shared `Context`."""

    interactors: ClassVar[tuple[Any, ...]] = ()
    """Configured steps; always empty for a plain interactor (see `Organizer`)."""

    def __init__(self, context: Mapping[str, Any] | None = None, /, **data: Any):
        self.context: Context = Context.build(context, **data)
        self.setup()

    # --- Construction Paths ---

    @classmethod
    def run(cls: type[I], context: Mapping[str, Any] | None = None, /, **data: Any) -> I:
        """Build an instance bound to ``context`` and perform it.

        Args:
            context: A `Context` to share, or a mapping to build one from.
                Omitted means an empty context.
            **data: Extra keys merged into the context.

        Returns:
            The performed instance; inspect ``.context``, ``.success`` or
            ``.failure`` for the outcome.
        """
        instance = cls(context, **data)
        instance.perform()
        return instance

    @classmethod
    def run_rollback(
        cls: type[I], context: Mapping[str, Any] | None = None, /, **data: Any
    ) -> I:
        """Build an instance bound to ``context`` and roll it back.

        Returns:
            The rolled back instance.
        """
        instance = cls(context, **data)
        instance.rollback()
        return instance

    # --- Hooks ---

    def setup(self) -> None:
        """Called once at the end of construction. Does nothing by default."""

    def perform(self) -> None:
        """Do the work. Does nothing by default."""

    def rollback(self) -> None:
        """Undo the work done by `perform`. Does nothing by default.

        Must be safe to call when `perform` only partially completed.
        """

    # --- Context deferral ---

    def fail(self, **updates: Any) -> None:
        """Signal failure on the shared context, merging ``updates`` into it."""
        self.context.fail(**updates)

    @property
    def success(self) -> bool:
        """Whether the shared context has not failed."""
        return self.context.success

    @property
    def failure(self) -> bool:
        """Whether the shared context has failed."""
        return self.context.failure

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails.
        context = self.__dict__.get("context")
        if name.startswith("_") or context is None:
            raise AttributeError(name)
        try:
            return context[name]
        except ContextKeyError as e:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r} "
                "and the key is not present in its context",
                name=name,
                obj=self,
            ) from e

    def __repr__(self) -> str:
        return f"<{type(self).__name__} context={self.context!r}>"
