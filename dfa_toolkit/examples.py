"""
Ready-made machines built with the public builder API.
"""

from typing import Callable, Dict, Optional

from .builder import MachineBuilder
from .config import RuntimeConfig
from .core import Machine


class Mod3Machine:
    """
    Accepts binary strings whose value is divisible by three.

    States track the remainder of the prefix read so far. Reading bit `b`
    with remainder `r` moves to remainder `(r * 2 + b) % 3`. The empty
    string is read as zero, so it is accepted.
    """

    def __init__(self, config: Optional[RuntimeConfig] = None):
        self._machine = self._build_machine(config)

    @classmethod
    def create(cls, config: Optional[RuntimeConfig] = None) -> "Mod3Machine":
        return cls(config)

    @property
    def machine(self) -> Machine:
        return self._machine

    def is_divisible_by_three(self, binary: str) -> bool:
        """
        Raises:
            TransitionError: If `binary` contains anything other than 0 and 1
        """
        return self._machine.process(binary)

    @staticmethod
    def _build_machine(config: Optional[RuntimeConfig]) -> Machine:
        builder = (MachineBuilder.create("mod3", config)
                   .set_alphabet(["0", "1"])
                   .add_state("S0", is_accepting=True)
                   .add_state("S1")
                   .add_state("S2")
                   .set_initial_state("S0"))

        for remainder in range(3):
            for bit in (0, 1):
                builder.add_transition(f"S{remainder}", str(bit), f"S{(remainder * 2 + bit) % 3}")

        return builder.build()


def mod3_machine(config: Optional[RuntimeConfig] = None) -> Machine:
    return Mod3Machine(config).machine


def even_ones_machine(config: Optional[RuntimeConfig] = None) -> Machine:
    """Binary strings containing an even number of 1s"""
    return (MachineBuilder.create("even_ones", config)
            .set_alphabet(["0", "1"])
            .add_state("Even", is_accepting=True)
            .add_state("Odd")
            .set_initial_state("Even")
            .add_transition("Even", "0", "Even")
            .add_transition("Even", "1", "Odd")
            .add_transition("Odd", "0", "Odd")
            .add_transition("Odd", "1", "Even")
            .build())


def ends_with_01_machine(config: Optional[RuntimeConfig] = None) -> Machine:
    """Binary strings ending in '01'"""
    return (MachineBuilder.create("ends_with_01", config)
            .set_alphabet(["0", "1"])
            .add_state("Start")
            .add_state("Saw0")
            .add_state("Saw01", is_accepting=True)
            .set_initial_state("Start")
            .add_transition("Start", "0", "Saw0")
            .add_transition("Start", "1", "Start")
            .add_transition("Saw0", "0", "Saw0")
            .add_transition("Saw0", "1", "Saw01")
            .add_transition("Saw01", "0", "Saw0")
            .add_transition("Saw01", "1", "Start")
            .build())


def length_mod3_machine(config: Optional[RuntimeConfig] = None) -> Machine:
    """Strings over {a, b} whose length is a multiple of three"""
    builder = (MachineBuilder.create("length_mod3", config)
               .set_alphabet(["a", "b"])
               .add_state("Len0", is_accepting=True)
               .add_state("Len1")
               .add_state("Len2")
               .set_initial_state("Len0"))

    for length in range(3):
        for symbol in ("a", "b"):
            builder.add_transition(f"Len{length}", symbol, f"Len{(length + 1) % 3}")

    return builder.build()


EXAMPLES: Dict[str, Callable[[Optional[RuntimeConfig]], Machine]] = {
    "mod3": mod3_machine,
    "even-ones": even_ones_machine,
    "ends-with-01": ends_with_01_machine,
    "length-mod3": length_mod3_machine,
}
