"""Contract tests for Outcome and ValueOutcome.

Cover the construction surface, the extraction accessors and the
branching combinators, including the async ones.
"""

import asyncio
from dataclasses import FrozenInstanceError

import pytest

from fallible import Error, Outcome, ValueOutcome, into_outcome, into_value_outcome


class TestOutcomeConstruction:
    @pytest.mark.unit
    def test_true_and_false(self):
        assert Outcome.true() == Outcome(succeeded=True, errors=())
        assert Outcome.false() == Outcome(succeeded=False, errors=())

    @pytest.mark.unit
    def test_error_holds_exactly_one_error(self):
        outcome = Outcome.error("disk full")

        assert outcome.failed
        assert outcome.errors == (Error("disk full"),)

    @pytest.mark.unit
    def test_from_errors_with_single_message_matches_error(self):
        assert Outcome.from_errors("disk full") == Outcome.error("disk full")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "errors",
        [
            [],
            [Error("a")],
            [Error("b"), Error("a"), Error.from_object(42)],
        ],
    )
    def test_from_errors_preserves_sequence(self, errors):
        outcome = Outcome.from_errors(errors)

        assert outcome.succeeded is False
        assert outcome.errors == tuple(errors)

    @pytest.mark.unit
    def test_from_errors_does_not_mutate_input(self):
        errors = [Error("a"), Error("b")]
        Outcome.from_errors(errors)

        assert errors == [Error("a"), Error("b")]

    @pytest.mark.unit
    def test_from_bool(self):
        assert Outcome.from_bool(True).succeeded is True
        assert Outcome.from_bool(False).succeeded is False
        assert Outcome.from_bool(False).errors == ()

    @pytest.mark.unit
    def test_from_error(self):
        err = Error("nope")

        assert Outcome.from_error(err) == Outcome(succeeded=False, errors=(err,))

    @pytest.mark.unit
    def test_constructor_freezes_error_list(self):
        outcome = Outcome(succeeded=False, errors=[Error("a")])

        assert isinstance(outcome.errors, tuple)

    @pytest.mark.unit
    def test_outcome_is_immutable(self):
        outcome = Outcome.true()

        with pytest.raises(FrozenInstanceError):
            outcome.succeeded = False  # type: ignore[misc]

    @pytest.mark.unit
    def test_factories_on_value_outcome_return_value_outcome(self):
        for outcome in (
            ValueOutcome.true(),
            ValueOutcome.false(),
            ValueOutcome.error("x"),
            ValueOutcome.from_errors(["x", "y"]),
            ValueOutcome.from_bool(True),
            ValueOutcome.from_error(Error("x")),
        ):
            assert isinstance(outcome, ValueOutcome)
            assert outcome.value is None


class TestFirstError:
    @pytest.mark.unit
    def test_bad_input_scenario(self):
        outcome = Outcome.from_errors(["bad input", "missing field"])

        assert outcome.succeeded is False
        assert [str(e) for e in outcome.errors] == ["bad input", "missing field"]
        assert str(outcome.first_error) == "bad input"

    @pytest.mark.unit
    def test_first_error_defaults_to_empty_message(self):
        assert Outcome.false().first_error == Error("")
        assert str(Outcome.false().first_error) == ""


class TestCorrelationPolicy:
    """``succeeded`` decides; ``errors`` is advisory."""

    @pytest.mark.unit
    def test_success_may_carry_errors(self):
        outcome = ValueOutcome(succeeded=True, errors=(Error("deprecated field"),), value=7)

        assert outcome.match(lambda v: v, lambda errs: -1) == 7
        assert outcome.unwrap_or(0) == 7
        assert str(outcome.first_error) == "deprecated field"

    @pytest.mark.unit
    def test_failure_may_carry_no_errors(self):
        outcome = ValueOutcome(succeeded=False, value=7)

        assert outcome.match(lambda v: v, lambda errs: errs) == ()
        assert outcome.unwrap_or(0) == 0


class TestGenericFactories:
    @pytest.mark.unit
    @pytest.mark.parametrize("value", [1, 0, "", [], {"k": "v"}, False])
    def test_create_wraps_non_none_values(self, value):
        outcome = Outcome.create(value)

        assert outcome.succeeded is True
        assert outcome.unwrap_or(object()) == value

    @pytest.mark.unit
    def test_create_none_fails_without_errors(self):
        outcome = ValueOutcome.create(None)

        assert outcome.succeeded is False
        assert outcome.errors == ()

    @pytest.mark.unit
    def test_success_none_succeeds(self):
        assert Outcome.success(None).succeeded is True

    @pytest.mark.unit
    def test_success_zero_is_distinguishable_only_by_flag(self):
        ok = ValueOutcome.success(0)
        failed = ValueOutcome.false()

        assert ok.succeeded is True
        assert ok.unwrap_or(99) == 0
        assert ok.unwrap_unsafe() == 0
        assert failed.succeeded is False

    @pytest.mark.unit
    def test_wrap_and_create_disagree_on_none(self):
        assert ValueOutcome.wrap(None).succeeded is True
        assert into_value_outcome(None).succeeded is True
        assert Outcome.create(None).succeeded is False


class TestIntoOutcome:
    @pytest.mark.unit
    def test_bool(self):
        assert into_outcome(True) == Outcome.true()
        assert into_outcome(False) == Outcome.false()

    @pytest.mark.unit
    def test_single_error_and_string(self):
        assert into_outcome(Error("x")) == Outcome.error("x")
        assert into_outcome("x") == Outcome.error("x")

    @pytest.mark.unit
    def test_error_list(self):
        outcome = into_outcome([Error("a"), Error("b")])

        assert outcome.failed
        assert outcome.errors == (Error("a"), Error("b"))

    @pytest.mark.unit
    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            into_outcome(3.5)  # type: ignore[arg-type]


class TestExtraction:
    @pytest.mark.unit
    def test_is_success_unpacks(self):
        ok, value = ValueOutcome.success("data").is_success()

        assert ok is True
        assert value == "data"

    @pytest.mark.unit
    def test_is_success_on_failure_still_writes_value(self):
        ok, value = ValueOutcome.error("x").is_success()

        assert ok is False
        assert value is None

    @pytest.mark.unit
    def test_if_not_success(self):
        assert ValueOutcome.success(1).if_not_success() == (False, 1)
        assert ValueOutcome.false().if_not_success() == (True, None)

    @pytest.mark.unit
    def test_unwrap_or_returns_default_on_failure(self):
        assert ValueOutcome.error("x").unwrap_or("fallback") == "fallback"

    @pytest.mark.unit
    def test_unwrap_unsafe_ignores_flag(self):
        outcome = ValueOutcome(succeeded=False, value="stale")

        assert outcome.unwrap_unsafe() == "stale"


class TestCombinators:
    @pytest.mark.unit
    def test_if_successful_runs_once_on_success(self):
        calls = []
        ValueOutcome.success(5).if_successful(calls.append)

        assert calls == [5]

    @pytest.mark.unit
    def test_if_successful_skips_on_failure(self):
        calls = []
        ValueOutcome.error("x").if_successful(calls.append)

        assert calls == []

    @pytest.mark.unit
    def test_map_on_success(self):
        assert ValueOutcome.success(2).map(lambda v: v * 10) == ValueOutcome.success(20)

    @pytest.mark.unit
    def test_map_keeps_zero_result_distinct_from_failure(self):
        mapped = ValueOutcome.success(5).map(lambda v: 0)

        assert mapped.succeeded is True
        assert mapped.unwrap_or(-1) == 0

    @pytest.mark.unit
    def test_map_on_failure_carries_errors(self):
        calls = []
        source = ValueOutcome.from_errors(["a", "b"])
        mapped = source.map(lambda v: calls.append(v))

        assert calls == []
        assert mapped.failed
        assert mapped.errors == source.errors

    @pytest.mark.unit
    def test_match_success_branch_only(self):
        seen = {"success": [], "failure": []}
        result = ValueOutcome.success("v").match(
            lambda v: seen["success"].append(v) or "S",
            lambda errs: seen["failure"].append(errs) or "F",
        )

        assert result == "S"
        assert seen == {"success": ["v"], "failure": []}

    @pytest.mark.unit
    def test_match_failure_branch_gets_errors(self):
        outcome = ValueOutcome.from_errors(["a", "b"])
        seen = {"success": [], "failure": []}
        result = outcome.match(
            lambda v: seen["success"].append(v) or "S",
            lambda errs: seen["failure"].append(errs) or "F",
        )

        assert result == "F"
        assert seen["success"] == []
        assert seen["failure"] == [outcome.errors]

    @pytest.mark.unit
    def test_if_successful_or_else(self):
        log = []
        ValueOutcome.success(1).if_successful_or_else(
            lambda v: log.append(("ok", v)), lambda errs: log.append(("err", errs))
        )
        ValueOutcome.error("x").if_successful_or_else(
            lambda v: log.append(("ok", v)), lambda errs: log.append(("err", errs))
        )

        assert log == [("ok", 1), ("err", (Error("x"),))]


class TestAsyncCombinators:
    @pytest.mark.unit
    def test_if_successful_async_awaits_on_success(self):
        calls = []

        async def action(value):
            await asyncio.sleep(0)
            calls.append(value)

        asyncio.run(ValueOutcome.success("v").if_successful_async(action))

        assert calls == ["v"]

    @pytest.mark.unit
    def test_if_successful_async_skips_on_failure(self):
        calls = []

        async def action(value):
            calls.append(value)

        asyncio.run(ValueOutcome.error("x").if_successful_async(action))

        assert calls == []

    @pytest.mark.unit
    def test_match_async_is_symmetric(self):
        async def on_success(value):
            return f"ok:{value}"

        async def on_failure(errors):
            return f"failed:{len(errors)}"

        assert asyncio.run(ValueOutcome.success(3).match_async(on_success, on_failure)) == "ok:3"
        assert (
            asyncio.run(ValueOutcome.from_errors(["a", "b"]).match_async(on_success, on_failure))
            == "failed:2"
        )

    @pytest.mark.unit
    def test_if_successful_async_or_else_failure_branch_is_sync(self):
        log = []

        async def on_success(value):
            log.append(("ok", value))

        asyncio.run(ValueOutcome.success(1).if_successful_async_or_else(on_success, log.append))
        asyncio.run(ValueOutcome.error("x").if_successful_async_or_else(on_success, log.append))

        assert log == [("ok", 1), (Error("x"),)]

    @pytest.mark.unit
    def test_continuation_exceptions_propagate(self):
        async def boom(value):
            raise RuntimeError("from continuation")

        with pytest.raises(RuntimeError, match="from continuation"):
            asyncio.run(ValueOutcome.success(1).if_successful_async(boom))
