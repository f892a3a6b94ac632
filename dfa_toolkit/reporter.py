"""
Rendering of run results for the command line.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Sequence, Union

from .core import Machine, Transition
from .exceptions import TransitionError

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of running one input against a machine"""
    input: str
    accepted: bool
    final_state: Optional[str] = None
    error: Optional[str] = None
    path: List[Transition] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'input': self.input,
            'accepted': self.accepted,
            'final_state': self.final_state,
            'error': self.error,
            'path': [str(t) for t in self.path],
        }


def run_inputs(machine: Machine,
               inputs: Sequence[str],
               separator: Optional[str] = None,
               trace: bool = False) -> List[RunResult]:
    """
    Process every input and collect the results.

    Invalid symbols are reported on the result instead of being raised, so
    one bad input does not hide the others.

    Args:
        machine: Machine to run
        inputs: Raw input strings
        separator: Split inputs on this string instead of per character
        trace: Record the transitions taken
    """
    results = []

    for raw in inputs:
        symbols: Sequence[Hashable] = raw.split(separator) if separator and raw else raw
        try:
            outcome = machine.run(symbols, record_path=trace)
        except TransitionError as e:
            logger.debug(f"Input '{raw}' rejected: {e}")
            results.append(RunResult(input=raw, accepted=False, error=str(e)))
            continue

        results.append(RunResult(
            input=raw,
            accepted=outcome.accepted,
            final_state=outcome.final_state.name,
            path=list(outcome.path)
        ))

    return results


class ResultReporter:
    """Generate run reports in console or JSON format"""

    @staticmethod
    def generate_report(machine: Machine,
                        results: List[RunResult],
                        format: str = "console",
                        output: Optional[Union[str, Path]] = None) -> str:
        """
        Generate a report for a batch of runs.

        Args:
            machine: Machine the inputs were run against
            results: Results from `run_inputs`
            format: Output format (console, json)
            output: Optional output file path

        Returns:
            Generated report as string
        """
        if format == "console":
            content = ResultReporter._generate_console_report(machine, results)
        elif format == "json":
            content = ResultReporter._generate_json_report(machine, results)
        else:
            raise ValueError(f"Unknown report format: {format}")

        if output:
            output = Path(output)
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, 'w') as f:
                f.write(content)
            logger.info(f"Report written to {output}")

        return content

    @staticmethod
    def describe(machine: Machine) -> str:
        """Human-readable summary of a machine's configuration"""
        lines = [
            f"Machine: {machine.name}",
            f"Alphabet: {', '.join(repr(str(s)) for s in machine.alphabet)}",
            f"Initial state: {machine.initial_state.name}",
            "States:",
        ]
        lines.extend(f"  {state}" for state in machine.states)
        lines.append("Transitions:")
        lines.extend(f"  {transition}" for transition in machine.transitions)
        return "\n".join(lines)

    @staticmethod
    def _generate_console_report(machine: Machine, results: List[RunResult]) -> str:
        lines = []

        for result in results:
            if result.failed:
                lines.append(f"'{result.input}' -> ERROR: {result.error}")
                continue

            verdict = "ACCEPT" if result.accepted else "REJECT"
            lines.append(f"'{result.input}' -> {verdict} ({result.final_state})")
            for transition in result.path:
                lines.append(f"    {transition}")

        accepted = sum(1 for r in results if r.accepted)
        errors = sum(1 for r in results if r.failed)
        lines.append("-" * 40)
        lines.append(f"{machine.name}: {len(results)} inputs, {accepted} accepted, "
                     f"{len(results) - accepted - errors} rejected, {errors} errors")
        return "\n".join(lines)

    @staticmethod
    def _generate_json_report(machine: Machine, results: List[RunResult]) -> str:
        data = {
            'machine': machine.name,
            'results': [r.to_dict() for r in results],
            'summary': {
                'total': len(results),
                'accepted': sum(1 for r in results if r.accepted),
                'errors': sum(1 for r in results if r.failed),
            }
        }
        return json.dumps(data, indent=2)
