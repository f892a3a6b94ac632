"""
Load machine definitions from YAML documents.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from .builder import MachineBuilder
from .config import RuntimeConfig
from .core import Machine
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class MachineLoader:
    """
    Builds machines from definition documents.

    Expected layout:

        name: mod3
        alphabet: ["0", "1"]
        initial_state: S0          # defaults to the first listed state
        states:
          - {name: S0, accepting: true}
          - S1                     # shorthand for a non-accepting state
        transitions:
          - {from: S0, symbol: "0", to: S0}

    `transitions` may also be a table of the form `{S0: {"0": S0, "1": S1}}`.
    State names and symbols are read as strings. Every definition goes
    through `MachineBuilder`, so the builder's validation applies unchanged.
    """

    @staticmethod
    def from_file(filepath: Union[str, Path], config: Optional[RuntimeConfig] = None) -> Machine:
        """Load a machine from a YAML file"""
        filepath = Path(filepath)

        with open(filepath, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError.invalid_definition(f"{filepath}: {e}") from e

        logger.debug(f"Loaded definition from {filepath}")
        return MachineLoader.from_dict(data, config=config, default_name=filepath.stem)

    @staticmethod
    def from_string(text: str, config: Optional[RuntimeConfig] = None) -> Machine:
        """Load a machine from YAML text"""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError.invalid_definition(str(e)) from e

        return MachineLoader.from_dict(data, config=config)

    @staticmethod
    def from_dict(data: Any,
                  config: Optional[RuntimeConfig] = None,
                  default_name: str = "dfa") -> Machine:
        """Build a machine from an already parsed definition"""
        if not isinstance(data, dict):
            raise ConfigurationError.invalid_definition("document must be a mapping")

        builder = MachineBuilder.create(str(data.get('name', default_name)), config)

        alphabet = data.get('alphabet', [])
        if not isinstance(alphabet, list):
            raise ConfigurationError.invalid_definition("'alphabet' must be a list")
        builder.set_alphabet(str(symbol) for symbol in alphabet)

        states = MachineLoader._parse_states(data.get('states'))
        for name, accepting in states:
            builder.add_state(name, is_accepting=accepting)

        initial_state = data.get('initial_state')
        if initial_state is not None:
            builder.set_initial_state(str(initial_state))
        elif states:
            builder.set_initial_state(states[0][0])

        for from_name, symbol, to_name in MachineLoader._parse_transitions(data.get('transitions', [])):
            builder.add_transition(from_name, symbol, to_name)

        return builder.build()

    @staticmethod
    def _parse_states(states_data: Any) -> List[tuple]:
        """Parse the state list into (name, accepting) pairs"""
        if states_data is None:
            raise ConfigurationError.invalid_definition("'states' is required")
        if not isinstance(states_data, list):
            raise ConfigurationError.invalid_definition("'states' must be a list")

        states = []
        for item in states_data:
            if isinstance(item, dict):
                if 'name' not in item:
                    raise ConfigurationError.invalid_definition(f"state entry without a name: {item}")
                accepting = item.get('accepting', False)
                if not isinstance(accepting, bool):
                    raise ConfigurationError.invalid_definition(
                        f"'accepting' for state '{item['name']}' must be true or false, got {accepting!r}"
                    )
                states.append((str(item['name']), accepting))
            else:
                states.append((str(item), False))
        return states

    @staticmethod
    def _parse_transitions(transitions_data: Any) -> List[tuple]:
        """Parse either transition layout into (from, symbol, to) triples"""
        transitions = []

        if isinstance(transitions_data, dict):
            for from_name, row in transitions_data.items():
                if not isinstance(row, dict):
                    raise ConfigurationError.invalid_definition(
                        f"transitions for '{from_name}' must map symbols to states"
                    )
                for symbol, to_name in row.items():
                    transitions.append((str(from_name), str(symbol), str(to_name)))

        elif isinstance(transitions_data, list):
            for item in transitions_data:
                if not isinstance(item, dict) or not {'from', 'symbol', 'to'} <= set(item):
                    raise ConfigurationError.invalid_definition(
                        f"transition entries need 'from', 'symbol' and 'to': {item}"
                    )
                transitions.append((str(item['from']), str(item['symbol']), str(item['to'])))

        else:
            raise ConfigurationError.invalid_definition("'transitions' must be a list or a mapping")

        return transitions


def load_machine(filepath: Union[str, Path], config: Optional[RuntimeConfig] = None) -> Machine:
    """Load a machine from a YAML definition file"""
    return MachineLoader.from_file(filepath, config=config)
