"""
Core DFA types: states, transitions and the execution engine.
"""

import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from . import metrics
from .config import RuntimeConfig
from .exceptions import StateError, TransitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class State:
    """
    A named node of the automaton.

    Identity is the name: two states with the same name compare equal even
    when their accepting flags differ.
    """
    name: str
    is_accepting: bool = field(default=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise StateError(f"State name must be a string, got {type(self.name).__name__}")
        if not self.name.strip():
            raise StateError.empty()

    def __str__(self) -> str:
        return f"{self.name} (accepting)" if self.is_accepting else self.name


@dataclass(frozen=True)
class Transition:
    """A directed edge taken when `symbol` is read in `from_state`"""
    from_state: State
    symbol: Hashable
    to_state: State

    def matches(self, state: State, symbol: Hashable) -> bool:
        return self.from_state == state and self.symbol == symbol

    def __str__(self) -> str:
        return f"{self.from_state.name} --[{self.symbol}]--> {self.to_state.name}"


@dataclass(frozen=True)
class RunOutcome:
    """Result of one run: the verdict, where it ended, and the path if recorded"""
    accepted: bool
    final_state: State
    path: Tuple[Transition, ...] = ()


class Machine:
    """
    An immutable deterministic finite automaton.

    Instances are produced by `MachineBuilder.build()`, which guarantees
    exactly one transition per (state, symbol) pair. Every `process` call runs
    with its own cursor, so a machine can be shared between threads.
    """

    def __init__(self,
                 states: Sequence[State],
                 alphabet: Sequence[Hashable],
                 transitions: Sequence[Transition],
                 initial_state: State,
                 name: str = "dfa",
                 config: Optional[RuntimeConfig] = None):
        """
        Initialize a machine from already validated parts.

        Args:
            states: All states, in registration order
            alphabet: Valid input symbols, in order
            transitions: Transition list, in registration order
            initial_state: State every run starts from
            name: Name used in logs and metric labels
            config: Runtime settings (defaults to the environment)
        """
        self.name = name
        self.config = config or RuntimeConfig.from_env()

        self._states: Tuple[State, ...] = tuple(states)
        self._alphabet: Tuple[Hashable, ...] = tuple(alphabet)
        self._transitions: Tuple[Transition, ...] = tuple(transitions)
        self._initial_state = initial_state

        # Snapshot of the accepting flags at build time
        self._accepting_states: Tuple[State, ...] = tuple(s for s in self._states if s.is_accepting)
        self._accepting_set = frozenset(self._accepting_states)

        self._state_map: Dict[str, State] = {s.name: s for s in self._states}
        self._symbol_set = frozenset(self._alphabet)

        # (from_state name, symbol) -> transition
        self._table: Dict[Tuple[str, Hashable], Transition] = {}
        for transition in self._transitions:
            self._table.setdefault((transition.from_state.name, transition.symbol), transition)

        self._lock = threading.Lock()
        self._current_state = initial_state
        self._history: Deque[Dict[str, Any]] = deque(maxlen=self.config.history_size)

    def __repr__(self) -> str:
        return (f"Machine(name={self.name!r}, states={len(self._states)}, "
                f"alphabet={list(self._alphabet)!r}, initial={self._initial_state.name!r})")

    def process(self, sequence: Iterable[Hashable]) -> bool:
        """
        Run a whole input sequence from the initial state.

        A string is read character by character; any other iterable is read
        element by element.

        Returns:
            True if the run ends in an accepting state. An empty sequence is
            accepted iff the initial state is accepting.

        Raises:
            TransitionError: If a symbol is not part of the alphabet
        """
        return self.run(sequence).accepted

    def run(self, sequence: Iterable[Hashable], record_path: bool = False) -> RunOutcome:
        """
        Process a sequence like `process` and return the whole outcome.

        Args:
            sequence: Input symbols
            record_path: Also collect the transitions taken

        Returns:
            RunOutcome with the verdict and the state this run ended in
        """
        start = time.perf_counter()
        cursor = self._initial_state
        consumed = 0
        path: List[Transition] = []

        try:
            for symbol in sequence:
                transition = self._step(cursor, symbol)
                if record_path:
                    path.append(transition)
                cursor = transition.to_state
                consumed += 1
        except TransitionError:
            with self._lock:
                self._current_state = self._initial_state
            self._record_metrics(metrics.RESULT_ERROR, consumed, start)
            raise

        accepted = cursor in self._accepting_set

        with self._lock:
            self._current_state = cursor
            if self.config.dev_mode:
                self._history.append({
                    'timestamp': datetime.now(timezone.utc).isoformat(),
                    'input_length': consumed,
                    'final_state': cursor.name,
                    'accepted': accepted,
                })

        self._record_metrics(
            metrics.RESULT_ACCEPTED if accepted else metrics.RESULT_REJECTED,
            consumed,
            start
        )
        logger.debug(f"[{self.name}] consumed {consumed} symbols, ended in {cursor.name}: "
                     f"{'accepted' if accepted else 'rejected'}")
        return RunOutcome(accepted=accepted, final_state=cursor, path=tuple(path))

    def trace(self, sequence: Iterable[Hashable]) -> List[Transition]:
        """
        Return the transitions a run over `sequence` takes, in order.

        Follows the same rules as `process` but leaves the current state and
        the metrics untouched.
        """
        cursor = self._initial_state
        path: List[Transition] = []
        for symbol in sequence:
            transition = self._step(cursor, symbol)
            path.append(transition)
            cursor = transition.to_state
        return path

    def reset(self) -> None:
        """Return the current state to the initial state"""
        with self._lock:
            self._current_state = self._initial_state

    def _step(self, cursor: State, symbol: Hashable) -> Transition:
        try:
            known = symbol in self._symbol_set
        except TypeError:
            known = False
        if not known:
            raise TransitionError.invalid_symbol(symbol, self._alphabet)

        transition = self._table.get((cursor.name, symbol))
        if transition is None:
            # Unreachable for machines produced by MachineBuilder
            raise TransitionError.not_defined(cursor.name, symbol)

        if self.config.dev_mode:
            logger.debug(f"[{self.name}] {transition}")
        return transition

    def _record_metrics(self, result: str, consumed: int, start: float):
        if self.config.metrics_enabled:
            metrics.record_run(self.name, result, consumed, time.perf_counter() - start)

    # Public API for introspection
    @property
    def states(self) -> Tuple[State, ...]:
        return self._states

    @property
    def alphabet(self) -> Tuple[Hashable, ...]:
        return self._alphabet

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return self._transitions

    @property
    def initial_state(self) -> State:
        return self._initial_state

    @property
    def accepting_states(self) -> Tuple[State, ...]:
        return self._accepting_states

    @property
    def current_state(self) -> State:
        """State the last successful run ended in, or the initial state"""
        with self._lock:
            return self._current_state

    def get_state(self, name: str) -> State:
        """Look up a state by name"""
        try:
            return self._state_map[name]
        except (KeyError, TypeError):
            raise StateError.undefined(name) from None

    def is_accepting(self, name: str) -> bool:
        return self.get_state(name) in self._accepting_set

    def get_history(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Get the most recent runs (recorded in dev mode only)"""
        with self._lock:
            history = list(self._history)
        return history[-limit:] if limit > 0 else []
