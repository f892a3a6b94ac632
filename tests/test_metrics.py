import pytest
from prometheus_client import REGISTRY

from dfa_toolkit import MachineBuilder, RuntimeConfig, TransitionError


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def _toggle(name, config):
    return (MachineBuilder.create(name, config)
            .set_alphabet(["t"])
            .add_state("Off", is_accepting=True)
            .add_state("On")
            .set_initial_state("Off")
            .add_transition("Off", "t", "On")
            .add_transition("On", "t", "Off")
            .build())


def test_build_counted(config):
    before = _sample('dfa_machines_built_total', machine='metrics_build')
    _toggle('metrics_build', config)
    assert _sample('dfa_machines_built_total', machine='metrics_build') == before + 1


def test_runs_counted_by_result(config):
    machine = _toggle('metrics_runs', config)

    machine.process("tt")
    machine.process("t")
    with pytest.raises(TransitionError):
        machine.process("x")

    assert _sample('dfa_runs_total', machine='metrics_runs', result='accepted') == 1
    assert _sample('dfa_runs_total', machine='metrics_runs', result='rejected') == 1
    assert _sample('dfa_runs_total', machine='metrics_runs', result='error') == 1
    assert _sample('dfa_symbols_consumed_total', machine='metrics_runs') == 3
    assert _sample('dfa_run_duration_seconds_count', machine='metrics_runs') == 3


def test_disabled_metrics_not_recorded():
    machine = _toggle('metrics_off', RuntimeConfig(metrics_enabled=False))
    machine.process("t")

    assert REGISTRY.get_sample_value('dfa_machines_built_total', {'machine': 'metrics_off'}) is None
    assert REGISTRY.get_sample_value(
        'dfa_runs_total', {'machine': 'metrics_off', 'result': 'rejected'}
    ) is None


def test_symbols_before_invalid_symbol_counted(config):
    machine = _toggle('metrics_partial', config)

    with pytest.raises(TransitionError):
        machine.process("ttx")

    assert _sample('dfa_runs_total', machine='metrics_partial', result='error') == 1
    assert _sample('dfa_symbols_consumed_total', machine='metrics_partial') == 2
