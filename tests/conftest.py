import pytest

from dfa_toolkit import MachineBuilder, RuntimeConfig


@pytest.fixture
def config():
    return RuntimeConfig()


@pytest.fixture
def dev_config():
    return RuntimeConfig(dev_mode=True, history_size=3)


@pytest.fixture
def parity_builder(config):
    """Complete builder for binary strings with an even number of 1s"""
    return (MachineBuilder.create("parity", config)
            .set_alphabet(["0", "1"])
            .add_state("Even", is_accepting=True)
            .add_state("Odd")
            .set_initial_state("Even")
            .add_transition("Even", "0", "Even")
            .add_transition("Even", "1", "Odd")
            .add_transition("Odd", "0", "Odd")
            .add_transition("Odd", "1", "Even"))


@pytest.fixture
def parity(parity_builder):
    return parity_builder.build()
