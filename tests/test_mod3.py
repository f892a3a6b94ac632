import pytest

from dfa_toolkit import Mod3Machine, TransitionError
from dfa_toolkit.examples import (
    EXAMPLES,
    ends_with_01_machine,
    even_ones_machine,
    length_mod3_machine,
)


@pytest.fixture
def mod3(config):
    return Mod3Machine.create(config)


class TestMod3:

    @pytest.mark.parametrize("binary,expected", [
        ("", True),
        ("0", True),
        ("1", False),
        ("11", True),
        ("110", True),
        ("1001", True),
        ("10", False),
    ])
    def test_documented_examples(self, mod3, binary, expected):
        assert mod3.is_divisible_by_three(binary) is expected

    def test_invalid_character(self, mod3):
        with pytest.raises(TransitionError, match="Invalid symbol '2'"):
            mod3.is_divisible_by_three("1012")

    @pytest.mark.parametrize("binary", ["1a", "1 1", "0b11", "-1"])
    def test_non_binary_characters(self, mod3, binary):
        with pytest.raises(TransitionError):
            mod3.is_divisible_by_three(binary)

    def test_range_0_to_100(self, mod3):
        for value in range(101):
            assert mod3.is_divisible_by_three(format(value, "b")) is (value % 3 == 0), value

    def test_large_numbers(self, mod3):
        for value in (3 ** 20, 2 ** 40 + 2, 999_999_999, 10 ** 18):
            assert mod3.is_divisible_by_three(format(value, "b")) is (value % 3 == 0)

    def test_leading_zeros(self, mod3):
        assert mod3.is_divisible_by_three("00011") is True
        assert mod3.is_divisible_by_three("0000100") is False

    def test_powers_of_two_never_divisible(self, mod3):
        for exponent in range(32):
            assert mod3.is_divisible_by_three(format(2 ** exponent, "b")) is False

    def test_consecutive_processing(self, mod3):
        assert mod3.is_divisible_by_three("11") is True
        assert mod3.is_divisible_by_three("1") is False
        assert mod3.is_divisible_by_three("110") is True

    def test_underlying_machine(self, mod3):
        machine = mod3.machine
        assert machine.name == "mod3"
        assert [s.name for s in machine.states] == ["S0", "S1", "S2"]
        assert machine.alphabet == ("0", "1")
        assert machine.initial_state.name == "S0"
        assert [s.name for s in machine.accepting_states] == ["S0"]
        assert {str(t) for t in machine.transitions} == {
            "S0 --[0]--> S0", "S0 --[1]--> S1",
            "S1 --[0]--> S2", "S1 --[1]--> S0",
            "S2 --[0]--> S1", "S2 --[1]--> S2",
        }


class TestOtherExamples:

    @pytest.mark.parametrize("text,expected", [
        ("1100", True), ("111", False), ("0000", True), ("1", False),
    ])
    def test_even_ones(self, config, text, expected):
        assert even_ones_machine(config).process(text) is expected

    @pytest.mark.parametrize("text,expected", [
        ("01", True), ("101", True), ("001", True), ("1001", True), ("10", False), ("11", False),
    ])
    def test_ends_with_01(self, config, text, expected):
        assert ends_with_01_machine(config).process(text) is expected

    @pytest.mark.parametrize("text,expected", [
        ("", True), ("a", False), ("ab", False), ("aaa", True), ("abab", False), ("aabbaa", True),
    ])
    def test_length_mod3(self, config, text, expected):
        assert length_mod3_machine(config).process(text) is expected

    def test_registry_builds_every_example(self, config):
        for name, factory in EXAMPLES.items():
            machine = factory(config)
            assert machine.process("") in (True, False), name
