import dataclasses

import pytest

from dfa_toolkit import State, StateError, Transition


class TestState:

    def test_not_accepting_by_default(self):
        assert State("S0").is_accepting is False

    def test_accepting_state(self):
        state = State("S0", is_accepting=True)
        assert state.name == "S0"
        assert state.is_accepting is True

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_empty_or_whitespace_name_rejected(self, name):
        with pytest.raises(StateError, match="Empty name"):
            State(name)

    def test_non_string_name_rejected(self):
        with pytest.raises(StateError, match="must be a string"):
            State(3)

    def test_string_representation(self):
        assert str(State("S0")) == "S0"
        assert str(State("S0", is_accepting=True)) == "S0 (accepting)"

    def test_equality_is_by_name_only(self):
        assert State("S0", is_accepting=True) == State("S0", is_accepting=False)
        assert hash(State("S0", is_accepting=True)) == hash(State("S0"))
        assert State("S0") != State("S1")

    def test_names_can_contain_various_characters(self):
        for name in ("state-1", "q_0", "Ünïcode", "with space"):
            assert State(name).name == name

    def test_immutable(self):
        state = State("S0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.name = "S1"


class TestTransition:

    @pytest.fixture
    def s0(self):
        return State("S0", is_accepting=True)

    @pytest.fixture
    def s1(self):
        return State("S1")

    def test_attributes(self, s0, s1):
        transition = Transition(s0, "1", s1)
        assert transition.from_state == s0
        assert transition.symbol == "1"
        assert transition.to_state == s1

    def test_matches_state_and_symbol(self, s0, s1):
        transition = Transition(s0, "1", s1)
        assert transition.matches(s0, "1")
        assert transition.matches(State("S0"), "1")
        assert not transition.matches(s1, "1")
        assert not transition.matches(s0, "0")
        assert not transition.matches(s1, "0")

    def test_string_representation(self, s0, s1):
        assert str(Transition(s0, "1", s1)) == "S0 --[1]--> S1"

    def test_self_loop(self, s0):
        transition = Transition(s0, "a", s0)
        assert transition.from_state == transition.to_state
        assert str(transition) == "S0 --[a]--> S0"

    def test_any_symbol_is_structurally_valid(self, s0, s1):
        for symbol in ("x", "long-token", 7, ("a", "b")):
            assert Transition(s0, symbol, s1).symbol == symbol
