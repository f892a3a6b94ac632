"""
Exception hierarchy for machine construction and execution.
"""

from typing import Any, Hashable, Iterable, Optional, Sequence, Tuple


def _quote_all(symbols: Iterable[Any]) -> str:
    return ", ".join(f"'{s}'" for s in symbols)


class DFAError(Exception):
    """Base class for every error raised by the toolkit"""
    pass


class ConfigurationError(DFAError):
    """
    A machine cannot be built from the current configuration.

    Raised for missing pieces (states, alphabet, initial state), incomplete
    transition tables, malformed definition files, and reuse of a builder
    after it produced a machine.
    """

    def __init__(self,
                 message: str,
                 state_name: Optional[str] = None,
                 missing_symbols: Sequence[Hashable] = ()):
        super().__init__(message)
        self.state_name = state_name
        self.missing_symbols: Tuple[Hashable, ...] = tuple(missing_symbols)

    @classmethod
    def no_states(cls) -> "ConfigurationError":
        return cls("State machine must have at least one state defined (no states).")

    @classmethod
    def empty_alphabet(cls) -> "ConfigurationError":
        return cls("State machine must have at least one symbol in its alphabet (empty alphabet).")

    @classmethod
    def no_initial_state(cls) -> "ConfigurationError":
        return cls("State machine must have an initial state defined (no initial state).")

    @classmethod
    def incomplete_transitions(cls,
                               state_name: str,
                               missing_symbols: Sequence[Hashable]) -> "ConfigurationError":
        return cls(
            f"Incomplete transitions: state '{state_name}' is missing transitions "
            f"for symbols: {_quote_all(missing_symbols)}. Every state must have a "
            f"transition for every symbol in the alphabet.",
            state_name=state_name,
            missing_symbols=missing_symbols,
        )

    @classmethod
    def already_built(cls) -> "ConfigurationError":
        return cls("Builder already consumed: the state machine has already been built and is immutable.")

    @classmethod
    def invalid_definition(cls, reason: str) -> "ConfigurationError":
        return cls(f"Invalid definition: {reason}")

    @classmethod
    def unhashable_symbol(cls, symbol: Any) -> "ConfigurationError":
        return cls(f"Invalid alphabet: symbol {symbol!r} is not hashable. "
                   f"Symbols must be hashable tokens such as strings or integers.")


class StateError(DFAError):
    """A state name does not resolve, collides with another, or is empty"""

    def __init__(self, message: str, state_name: Optional[str] = None):
        super().__init__(message)
        self.state_name = state_name

    @classmethod
    def undefined(cls, state_name: str) -> "StateError":
        return cls(f"Undefined state: '{state_name}' is not defined in the state machine.",
                   state_name=state_name)

    @classmethod
    def duplicate(cls, state_name: str) -> "StateError":
        return cls(f"Duplicate state name: '{state_name}' already exists in the state machine.",
                   state_name=state_name)

    @classmethod
    def empty(cls) -> "StateError":
        return cls("Empty name: a state name cannot be empty or whitespace.")


class TransitionError(DFAError):
    """
    A transition collides with an existing one, or an input symbol cannot be
    consumed during execution.
    """

    def __init__(self,
                 message: str,
                 state_name: Optional[str] = None,
                 symbol: Optional[Hashable] = None,
                 alphabet: Sequence[Hashable] = ()):
        super().__init__(message)
        self.state_name = state_name
        self.symbol = symbol
        self.alphabet: Tuple[Hashable, ...] = tuple(alphabet)

    @classmethod
    def duplicate(cls, state_name: str, symbol: Hashable) -> "TransitionError":
        return cls(
            f"Duplicate transition: a transition already exists from state '{state_name}' "
            f"with input symbol '{symbol}'. Each state-symbol pair must have exactly one transition.",
            state_name=state_name,
            symbol=symbol,
        )

    @classmethod
    def invalid_symbol(cls, symbol: Any, alphabet: Sequence[Hashable]) -> "TransitionError":
        return cls(
            f"Invalid symbol '{symbol}'. Valid symbols are: {_quote_all(alphabet)}.",
            symbol=symbol,
            alphabet=alphabet,
        )

    @classmethod
    def unhashable_symbol(cls, state_name: str, symbol: Any) -> "TransitionError":
        return cls(
            f"Invalid symbol {symbol!r} in transition from state '{state_name}': "
            f"symbols must be hashable.",
            state_name=state_name,
        )

    @classmethod
    def not_defined(cls, state_name: str, symbol: Hashable) -> "TransitionError":
        return cls(
            f"Transition not defined from state '{state_name}' with input symbol '{symbol}'.",
            state_name=state_name,
            symbol=symbol,
        )
