"""
Staged, single-use builder that validates and freezes a DFA.
"""

import logging
from typing import Dict, Hashable, Iterable, List, Optional, Tuple, cast

from typing_extensions import Self

from . import metrics
from .config import RuntimeConfig
from .core import Machine, State, Transition
from .exceptions import ConfigurationError, StateError, TransitionError

logger = logging.getLogger(__name__)


class MachineBuilder:
    """
    Accumulates states, alphabet, transitions and an initial state, then
    validates them into an immutable `Machine`.

    Configuration methods return the builder so calls can be chained:

        machine = (MachineBuilder.create("parity")
                   .set_alphabet(["0", "1"])
                   .add_state("Even", is_accepting=True)
                   .add_state("Odd")
                   .set_initial_state("Even")
                   .add_transition("Even", "0", "Even")
                   .add_transition("Even", "1", "Odd")
                   .add_transition("Odd", "0", "Odd")
                   .add_transition("Odd", "1", "Even")
                   .build())

    A builder produces at most one machine. After a successful `build()`
    every further call raises `ConfigurationError`.
    """

    def __init__(self, name: str = "dfa", config: Optional[RuntimeConfig] = None):
        """
        Args:
            name: Name given to the machine, used in logs and metric labels
            config: Runtime settings handed to the machine
        """
        self.name = name
        self.config = config or RuntimeConfig.from_env()
        self._states: Dict[str, State] = {}
        self._alphabet: Tuple[Hashable, ...] = ()
        # (from_state name, symbol) -> transition, in registration order
        self._transitions: Dict[Tuple[str, Hashable], Transition] = {}
        self._initial_state: Optional[State] = None
        self._consumed = False

    @classmethod
    def create(cls, name: str = "dfa", config: Optional[RuntimeConfig] = None) -> "MachineBuilder":
        return cls(name=name, config=config)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def set_alphabet(self, symbols: Iterable[Hashable]) -> Self:
        """
        Replace the alphabet.

        Symbols are atomic tokens compared by equality; a string argument is
        split into its characters. Callers are expected to pass distinct
        symbols.
        """
        self._ensure_not_consumed()
        alphabet = tuple(symbols)
        for symbol in alphabet:
            try:
                hash(symbol)
            except TypeError:
                raise ConfigurationError.unhashable_symbol(symbol) from None
        self._alphabet = alphabet
        logger.debug(f"[{self.name}] alphabet set to {list(self._alphabet)}")
        return self

    def add_state(self, name: str, is_accepting: bool = False) -> Self:
        """Register a new state"""
        self._ensure_not_consumed()

        state = State(name, is_accepting)
        if name in self._states:
            raise StateError.duplicate(name)

        self._states[name] = state
        logger.debug(f"[{self.name}] added state {state}")
        return self

    def set_initial_state(self, name: str) -> Self:
        """Designate an already registered state as the initial state"""
        self._ensure_not_consumed()
        self._initial_state = self._get_state_or_raise(name)
        return self

    def add_transition(self, from_name: str, symbol: Hashable, to_name: str) -> Self:
        """
        Register the edge taken when `symbol` is read in `from_name`.

        Raises:
            StateError: If either endpoint is not registered
            TransitionError: If `from_name` already has a transition on `symbol`
        """
        self._ensure_not_consumed()

        from_state = self._get_state_or_raise(from_name)
        to_state = self._get_state_or_raise(to_name)

        key = (from_name, symbol)
        try:
            exists = key in self._transitions
        except TypeError:
            raise TransitionError.unhashable_symbol(from_name, symbol) from None
        if exists:
            raise TransitionError.duplicate(from_name, symbol)

        self._transitions[key] = Transition(from_state, symbol, to_state)
        logger.debug(f"[{self.name}] added transition {self._transitions[key]}")
        return self

    def build(self) -> Machine:
        """
        Validate the configuration and produce the machine.

        A failed validation leaves the builder usable so the configuration can
        be completed and `build()` retried.

        Raises:
            ConfigurationError: If the configuration is incomplete, or the
                builder has already produced a machine
        """
        self._ensure_not_consumed()
        self._validate()

        initial_state = cast(State, self._initial_state)

        for from_name, symbol in self._transitions:
            if symbol not in self._alphabet:
                logger.warning(f"[{self.name}] transition from '{from_name}' on '{symbol}' "
                               f"uses a symbol outside the alphabet and will never be taken")

        machine = Machine(
            states=list(self._states.values()),
            alphabet=self._alphabet,
            transitions=list(self._transitions.values()),
            initial_state=initial_state,
            name=self.name,
            config=self.config,
        )
        self._consumed = True

        if self.config.metrics_enabled:
            metrics.record_build(self.name)

        logger.info(f"Built machine {self.name}: {len(self._states)} states, "
                    f"{len(self._alphabet)} symbols, {len(self._transitions)} transitions")
        return machine

    def _validate(self):
        if not self._states:
            raise ConfigurationError.no_states()

        if not self._alphabet:
            raise ConfigurationError.empty_alphabet()

        if self._initial_state is None:
            raise ConfigurationError.no_initial_state()

        for state_name in self._states:
            missing: List[Hashable] = [
                symbol for symbol in self._alphabet
                if (state_name, symbol) not in self._transitions
            ]
            if missing:
                raise ConfigurationError.incomplete_transitions(state_name, missing)

    def _get_state_or_raise(self, name: str) -> State:
        try:
            return self._states[name]
        except (KeyError, TypeError):
            raise StateError.undefined(name) from None

    def _ensure_not_consumed(self):
        if self._consumed:
            raise ConfigurationError.already_built()


def create_builder(name: str = "dfa", config: Optional[RuntimeConfig] = None) -> MachineBuilder:
    """Create a fresh builder"""
    return MachineBuilder.create(name=name, config=config)
