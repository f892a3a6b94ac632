"""
Prometheus metrics for machine builds and runs.

Collectors are module-level and labelled by machine name, so any number of
machines can share the default registry.
"""

from prometheus_client import Counter, Histogram

MACHINES_BUILT = Counter(
    'dfa_machines_built_total',
    'Total machines produced by builders',
    labelnames=['machine']
)

RUNS = Counter(
    'dfa_runs_total',
    'Total input sequences processed',
    labelnames=['machine', 'result']
)

SYMBOLS_CONSUMED = Counter(
    'dfa_symbols_consumed_total',
    'Total input symbols consumed, including those read before an invalid symbol',
    labelnames=['machine']
)

RUN_DURATION = Histogram(
    'dfa_run_duration_seconds',
    'Time spent processing one input sequence',
    labelnames=['machine'],
    buckets=(0.00001, 0.0001, 0.001, 0.01, 0.1, 1)
)

RESULT_ACCEPTED = 'accepted'
RESULT_REJECTED = 'rejected'
RESULT_ERROR = 'error'


def record_build(machine: str) -> None:
    MACHINES_BUILT.labels(machine=machine).inc()


def record_run(machine: str, result: str, symbols: int, duration: float) -> None:
    """Record the outcome of one process() call"""
    RUNS.labels(machine=machine, result=result).inc()
    if symbols:
        SYMBOLS_CONSUMED.labels(machine=machine).inc(symbols)
    RUN_DURATION.labels(machine=machine).observe(duration)
