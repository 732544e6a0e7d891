"""Unit tests for the Interactor base class."""

from __future__ import annotations

import pytest

from interactor import Context, ContextKeyError, Interactor

# pylint: disable=magic-value-comparison,too-few-public-methods,no-member


# --- Fakes ---


class Recorder(Interactor):
    """Records which hooks ran on the instance."""

    def setup(self) -> None:
        self.ran: list[str] = ["setup"]

    def perform(self) -> None:
        self.ran.append("perform")

    def rollback(self) -> None:
        self.ran.append("rollback")


class Greeter(Interactor):
    """Derives a value from the context in setup."""

    def setup(self) -> None:
        self.context["greeting"] = f"hello {self.name}"


# --- Tests ---


class TestConstruction:
    """Tests for building an interactor."""

    @staticmethod
    def test_builds_context_from_mapping() -> None:
        """The given mapping becomes the instance's context."""
        instance = Interactor({"foo": "bar"})
        assert isinstance(instance.context, Context)
        assert instance.context["foo"] == "bar"

    @staticmethod
    def test_builds_context_from_keywords() -> None:
        """Keyword data also becomes context data."""
        instance = Interactor(foo="bar")
        assert instance.context == {"foo": "bar"}

    @staticmethod
    def test_blank_context_when_none_given() -> None:
        """No data yields an empty context."""
        instance = Interactor()
        assert instance.context == {}

    @staticmethod
    def test_holds_a_passed_context_by_reference() -> None:
        """A passed Context is shared, not copied."""
        ctx = Context.build({"a": 1})
        instance = Interactor(ctx)
        assert instance.context is ctx

    @staticmethod
    def test_calls_setup() -> None:
        """setup runs at the end of construction, with the context available."""
        instance = Greeter(name="ada")
        assert instance.context["greeting"] == "hello ada"

    @staticmethod
    def test_default_setup_exists_and_does_nothing() -> None:
        """The base setup hook is callable and leaves the context alone."""
        instance = Interactor(a=1)
        instance.setup()
        assert instance.context == {"a": 1}


class TestClassLevelRun:
    """Tests for Interactor.run and Interactor.run_rollback."""

    @staticmethod
    def test_run_performs_and_returns_the_instance() -> None:
        """run builds an instance, calls perform once, and returns it."""
        instance = Recorder.run({"foo": "bar"})
        assert isinstance(instance, Recorder)
        assert instance.ran == ["setup", "perform"]
        assert instance.context == {"foo": "bar"}

    @staticmethod
    def test_run_with_no_data_uses_blank_context() -> None:
        """run() with no data builds an empty context."""
        instance = Recorder.run()
        assert instance.context == {}
        assert instance.ran == ["setup", "perform"]

    @staticmethod
    def test_run_rollback_rolls_back_and_returns_the_instance() -> None:
        """run_rollback builds an instance, calls rollback once, and returns it."""
        instance = Recorder.run_rollback(foo="bar")
        assert instance.ran == ["setup", "rollback"]
        assert instance.context == {"foo": "bar"}

    @staticmethod
    def test_run_shares_a_passed_context() -> None:
        """run binds to the given Context rather than a copy."""
        ctx = Context.build()
        assert Recorder.run(ctx).context is ctx

    @staticmethod
    def test_default_perform_and_rollback_are_noops() -> None:
        """An interactor without overrides can be run and rolled back."""
        assert Interactor.run(a=1).context == {"a": 1}
        assert Interactor.run_rollback(a=1).context == {"a": 1}


class TestFailureDeferral:
    """Tests for success/failure/fail deferring to the context."""

    @staticmethod
    def test_success_by_default() -> None:
        """A fresh interactor reports success."""
        instance = Interactor()
        assert instance.success is True
        assert instance.failure is False

    @staticmethod
    def test_fail_defers_to_context() -> None:
        """fail() marks the shared context as failed."""
        instance = Interactor()
        instance.fail()
        assert instance.context.failure
        assert instance.failure is True
        assert instance.success is False

    @staticmethod
    def test_fail_passes_updates_to_context() -> None:
        """fail(**updates) merges the updates into the context."""
        instance = Interactor()
        instance.fail(foo="bar")
        assert instance.context == {"foo": "bar"}

    @staticmethod
    def test_reflects_failure_signaled_elsewhere() -> None:
        """Failure signaled on a shared context is visible to every binder."""
        ctx = Context.build()
        first, second = Interactor(ctx), Interactor(ctx)
        first.fail()
        assert second.failure


class TestContextDeferral:
    """Tests for attribute-style reads of context keys."""

    @staticmethod
    def test_defers_to_keys_that_exist() -> None:
        """Present keys are readable as attributes."""
        instance = Interactor(foo="bar")
        assert hasattr(instance, "foo")
        assert instance.foo == "bar"

    @staticmethod
    def test_sees_keys_written_after_construction() -> None:
        """Deferral is live, not a snapshot."""
        instance = Interactor()
        instance.context["late"] = 1
        assert instance.late == 1

    @staticmethod
    def test_bombs_if_the_key_does_not_exist() -> None:
        """Absent keys raise AttributeError chained from ContextKeyError."""
        instance = Interactor(foo="bar")
        assert not hasattr(instance, "baz")
        with pytest.raises(AttributeError, match="baz") as info:
            instance.baz  # pylint: disable=pointless-statement
        assert isinstance(info.value.__cause__, ContextKeyError)

    @staticmethod
    def test_private_names_are_never_deferred() -> None:
        """Underscore names are not looked up in the context."""
        instance = Interactor(_secret=1)
        assert not hasattr(instance, "_secret")

    @staticmethod
    def test_real_attributes_win_over_context_keys() -> None:
        """Methods and instance attributes shadow same-named keys."""
        instance = Interactor(perform="shadowed", context="shadowed")
        assert callable(instance.perform)
        assert isinstance(instance.context, Context)


def test_instance_interactors_defers_to_class() -> None:
    """A plain interactor organizes nothing."""
    assert not Interactor.interactors
    assert not Interactor().interactors
