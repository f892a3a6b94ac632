"""
DFA Toolkit

Build deterministic finite automata with a validating builder and run input
sequences against them.
"""

__version__ = "0.1.0"

from .core import (
    State,
    Transition,
    Machine,
    RunOutcome,
)

from .builder import MachineBuilder, create_builder
from .config import RuntimeConfig
from .exceptions import (
    DFAError,
    ConfigurationError,
    StateError,
    TransitionError,
)
from .loader import MachineLoader, load_machine
from .examples import Mod3Machine

__all__ = [
    "State",
    "Transition",
    "Machine",
    "RunOutcome",
    "MachineBuilder",
    "create_builder",
    "RuntimeConfig",
    "DFAError",
    "ConfigurationError",
    "StateError",
    "TransitionError",
    "MachineLoader",
    "load_machine",
    "Mod3Machine",
]
