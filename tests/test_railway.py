"""Tests for the sequence operators and composition helpers."""

import pytest

from fizzrail.outcome.models import EMPTY, Outcome, OutcomeError, continuing, terminal
from fizzrail.outcome.railway import (
    attempt,
    combine,
    compose,
    concat,
    fold_fragments,
    lift,
    merge,
    take_until_terminal,
    terminal_output,
    through_stations,
)
from fizzrail.rules.builtin import FIZZ, THE_ANSWER


class TestTakeUntilTerminal:
    def test_stops_after_first_terminal(self):
        outcomes = [continuing("a"), terminal("T"), continuing("b"), terminal("U")]
        assert list(take_until_terminal(outcomes)) == [continuing("a"), terminal("T")]

    def test_exhausts_input_without_terminal(self):
        outcomes = [continuing("a"), EMPTY, continuing("b")]
        assert list(take_until_terminal(outcomes)) == outcomes

    def test_empty_input(self):
        assert list(take_until_terminal([])) == []

    def test_source_not_advanced_past_terminal(self):
        produced = []

        def source():
            for outcome in (continuing("a"), terminal("T"), continuing("b")):
                produced.append(outcome)
                yield outcome

        assert list(take_until_terminal(source())) == [continuing("a"), terminal("T")]
        assert produced == [continuing("a"), terminal("T")]

    def test_is_lazy(self):
        def exploding():
            yield continuing("a")
            raise AssertionError("should not be pulled")

        stream = take_until_terminal(exploding())
        assert next(stream) == continuing("a")

    def test_restartable_from_source(self):
        outcomes = (continuing("a"), terminal("T"))
        assert list(take_until_terminal(outcomes)) == list(take_until_terminal(outcomes))


class TestCombine:
    def test_terminal_payload_wins(self):
        assert combine([continuing("a"), terminal("T")], "7") == "T"

    def test_concatenates_fragments_in_order(self):
        assert combine([continuing("A"), continuing("B"), continuing("C")], "7") == "ABC"

    def test_fallback_when_nothing_contributed(self):
        assert combine([EMPTY, EMPTY], "7") == "7"
        assert combine([], "7") == "7"

    def test_terminal_with_empty_payload_is_still_authoritative(self):
        assert combine([continuing("a"), terminal("")], "7") == ""

    def test_helpers(self):
        outcomes = [continuing("a"), terminal("T"), continuing("b")]
        assert fold_fragments(outcomes, seed=">") == ">ab"
        assert terminal_output(outcomes) == "T"
        assert terminal_output([continuing("a")]) is None

    def test_unknown_variant_is_not_dropped(self):
        rogue = object.__new__(Outcome)
        with pytest.raises(OutcomeError):
            combine([rogue, continuing("A")], "7")
        with pytest.raises(OutcomeError):
            fold_fragments([rogue])
        with pytest.raises(OutcomeError):
            terminal_output([continuing("a"), rogue])


class TestMerge:
    def test_left_terminal_wins(self):
        assert merge(terminal("L"), terminal("R")) == terminal("L")
        assert merge(terminal("L"), continuing("r")) == terminal("L")

    def test_right_terminal_wins_over_continuing(self):
        assert merge(continuing("l"), terminal("R")) == terminal("R")

    def test_fragments_concatenate(self):
        assert merge(continuing("Fizz"), continuing("Buzz")) == continuing("FizzBuzz")

    @pytest.mark.parametrize("outcome", [continuing("x"), terminal("y"), EMPTY])
    def test_empty_is_identity(self, outcome):
        assert merge(EMPTY, outcome) == outcome
        assert merge(outcome, EMPTY) == outcome

    def test_concat_sequence(self):
        assert concat([continuing("A"), EMPTY, continuing("B")]) == continuing("AB")
        assert concat([continuing("A"), terminal("T"), continuing("B")]) == terminal("T")
        assert concat([]) == EMPTY


class TestStations:
    def test_processes_all_stations(self):
        result = through_stations(
            continuing("start"),
            lift(lambda s: s + "-1"),
            lift(lambda s: s + "-2"),
            lift(lambda s: s + "-3"),
        )
        assert result == continuing("start-1-2-3")

    def test_stops_at_terminal(self):
        visited = []

        def station3(text):
            visited.append(text)
            return continuing(text + "-3")

        result = through_stations(
            continuing("start"),
            lift(lambda s: s + "-1"),
            lambda s: terminal("TERMINAL"),
            station3,
        )
        assert result == terminal("TERMINAL")
        assert visited == []

    def test_terminal_initial_skips_everything(self):
        assert through_stations(terminal("done"), lift(str.upper)) == terminal("done")

    def test_compose_binds_station_after_rule(self):
        shout = compose(FIZZ, lift(str.upper))
        assert shout(3) == continuing("FIZZ")
        assert shout(4) == continuing("")

    def test_compose_skips_station_on_terminal(self):
        visited = []

        def station(text):
            visited.append(text)
            return continuing(text + "!")

        composed = compose(THE_ANSWER, station)
        assert composed(42) == terminal(THE_ANSWER.output)
        assert visited == []
        assert composed(1) == continuing("!")


class TestAttempt:
    def test_passes_through_result(self):
        assert attempt(lambda: continuing("ok")) == continuing("ok")

    def test_exception_becomes_terminal(self):
        result = attempt(lambda: continuing(str(42 // int("0"))))
        assert result.is_terminal
        assert result.value.startswith("Error:")

    def test_in_pipeline_stops_later_steps(self):
        def derail(text):
            if "Step1" in text:
                raise RuntimeError("Derailment at Step1!")
            return continuing(text)

        result = (
            continuing("Start")
            .map(lambda s: s + " -> Step1")
            .bind(lambda s: attempt(lambda: derail(s)))
            .map(lambda s: s + " -> Step2")
        )
        assert result.is_terminal
        assert "Derailment at Step1!" in result.value
        assert "Step2" not in result.value
