"""The organizer execution engine.

An `Organizer` is an interactor whose `perform` drives a fixed, ordered
sequence of other interactors through one shared context:

- Steps run in declared order, each against the organizer's own context.
- After every step that returns normally the context is checked. If a step
  signaled failure the run stops and the organizer rolls back.
- Rollback undoes only the steps that completed (`Organizer.performed`), in
  reverse completion order.
- An exception raised by a step is not a failure signal. It propagates to the
  caller immediately and no rollback happens.

Nested organizers are rolled back only by themselves. When a nested
organizer fails, it compensates its own steps before the outer organizer
compensates the earlier outer steps. When a nested organizer completes and a
*later* outer step fails, the outer rollback calls the nested organizer's
`run_rollback`, which builds a fresh instance that has performed nothing, so
the nested steps stay done. Give such an organizer a `rollback` of its own
when its steps must be undone in that case.

Example:
    ```py
    class PlaceOrder(Organizer):
        interactors = [ReserveStock, ChargeCard, SendConfirmation]

    result = PlaceOrder.run(cart=cart, card=card)
    ```

The sequence may also be declared after the class body with
``PlaceOrder.organize(ReserveStock, ChargeCard, SendConfirmation)``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from typing import Any, ClassVar

from .errors import OrganizerConfigurationError
from .interactor import Interactor

logger = logging.getLogger(__name__)

_REQUIRED_ATTRS = ("run", "run_rollback")


class OrganizerState(enum.Enum):
    """Where an organizer is in its `perform` call."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


def _is_step(obj: Any) -> bool:
    return all(hasattr(obj, attr) for attr in _REQUIRED_ATTRS)


def _is_organizer(unit: Any) -> bool:
    return isinstance(unit, type) and issubclass(unit, Organizer)


def _normalize_units(units: Iterable[Any], owner: str) -> tuple[Any, ...]:
    """Turn a declared sequence into a validated tuple of step references."""
    normalized = tuple(units)
    for unit in normalized:
        missing = [attr for attr in _REQUIRED_ATTRS if not hasattr(unit, attr)]
        if missing:
            raise OrganizerConfigurationError(
                f"{owner}: {unit!r} is not an interactor (missing {', '.join(missing)})"
            )
    return normalized


def step_name(unit: Any) -> str:
    """Display name of a configured step (its qualified class name)."""
    return getattr(unit, "__qualname__", None) or repr(unit)


def _log_step_error(owner: str, action: str, unit: Any) -> None:
    """Log an exception escaping `unit`; call only from an ``except`` block.

    The traceback is logged once, by the organizer whose own step raised.
    Outer organizers only note that the error passed through them.
    """
    if _is_organizer(unit):
        logger.debug("%s: error from %s propagates", owner, step_name(unit))
    else:
        logger.exception("%s: exception %s %s", owner, action, step_name(unit))


class Organizer(Interactor):
    """An interactor that runs a configured sequence of interactors."""

    interactors: ClassVar[tuple[Any, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "interactors" in cls.__dict__:
            cls.interactors = _normalize_units(cls.__dict__["interactors"], cls.__name__)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._performed: list[Any] = []
        self.state = OrganizerState.IDLE
        super().__init__(*args, **kwargs)

    # --- Configuration ---

    @classmethod
    def organize(cls, *units: Any) -> None:
        """Declare the ordered steps of this organizer.

        Accepts either the steps as separate arguments or a single collection
        of steps (a list, tuple, generator or any other non-string iterable);
        both produce the same configuration.

        Raises:
            OrganizerConfigurationError: If this class already declared its
                steps, or if a step does not look like an interactor.
        """
        if "interactors" in cls.__dict__:
            raise OrganizerConfigurationError(
                f"{cls.__name__} already organizes {len(cls.interactors)} interactor(s)"
            )
        if (
            len(units) == 1
            and isinstance(units[0], Iterable)
            and not isinstance(units[0], (str, bytes))
            and not _is_step(units[0])
        ):
            units = tuple(units[0])
        cls.interactors = _normalize_units(units, cls.__name__)
        logger.debug(
            "%s organizes %s", cls.__name__, [step_name(unit) for unit in cls.interactors]
        )

    # --- Execution ---

    @property
    def performed(self) -> list[Any]:
        """Steps that completed during the current `perform`, in order."""
        return list(self._performed)

    def perform(self) -> None:
        """Run each configured step in order against the shared context.

        Stops at the first step after which the context has failed and rolls
        back the completed steps. Exceptions raised by a step propagate.

        Each call starts a new run: `performed` only ever holds the steps
        completed by the latest call.
        """
        owner = type(self).__name__
        self._performed.clear()
        self.state = OrganizerState.RUNNING
        for unit in self.interactors:
            logger.debug("%s: performing %s", owner, step_name(unit))
            try:
                unit.run(self.context)
            except Exception:  # pylint: disable=broad-except
                _log_step_error(owner, "performing", unit)
                raise
            self._performed.append(unit)

            if self.context.failure:
                logger.info(
                    "%s: %s signaled failure; rolling back %d step(s)",
                    owner,
                    step_name(unit),
                    len(self._performed),
                )
                self.state = OrganizerState.ABORTED
                self.rollback()
                return

        self.state = OrganizerState.COMPLETED
        logger.debug("%s: completed %d step(s)", owner, len(self._performed))

    def rollback(self) -> None:
        """Roll back every performed step, most recent first.

        Neither `performed` nor the context's failure flag is reset.
        """
        owner = type(self).__name__
        for unit in reversed(self.performed):
            logger.debug("%s: rolling back %s", owner, step_name(unit))
            try:
                unit.run_rollback(self.context)
            except Exception:  # pylint: disable=broad-except
                _log_step_error(owner, "rolling back", unit)
                raise
