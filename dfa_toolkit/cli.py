#!/usr/bin/env python3
"""
Command-line interface for running and inspecting DFAs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import RuntimeConfig
from .core import Machine
from .examples import EXAMPLES
from .exceptions import ConfigurationError, DFAError
from .loader import load_machine
from .reporter import ResultReporter, run_inputs

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfa-tool",
        description="Build deterministic finite automata and run inputs against them"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Run inputs against a YAML machine definition"
    )
    run_parser.add_argument(
        "definition",
        type=Path,
        help="Machine definition YAML file"
    )
    _add_run_arguments(run_parser)

    example_parser = subparsers.add_parser(
        "example",
        help="Run inputs against a built-in example machine"
    )
    example_parser.add_argument(
        "name",
        choices=sorted(EXAMPLES),
        help="Example machine"
    )
    _add_run_arguments(example_parser)

    describe_parser = subparsers.add_parser(
        "describe",
        help="Print the states, alphabet and transitions of a machine"
    )
    describe_parser.add_argument(
        "definition",
        type=Path,
        nargs="?",
        help="Machine definition YAML file"
    )
    describe_parser.add_argument(
        "-e", "--example",
        choices=sorted(EXAMPLES),
        help="Describe a built-in example instead"
    )

    return parser


def _add_run_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Input sequences (use '' for the empty sequence)"
    )
    parser.add_argument(
        "-s", "--separator",
        help="Split inputs on this string instead of per character"
    )
    parser.add_argument(
        "-f", "--format",
        choices=["console", "json"],
        default="console",
        help="Report format (default: %(default)s)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file for report"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Show the transitions taken for each input"
    )


def _load(args: argparse.Namespace, config: RuntimeConfig) -> Machine:
    example = getattr(args, "example", None) or getattr(args, "name", None)
    if example:
        return EXAMPLES[example](config)
    return load_machine(args.definition, config=config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "describe" and (args.definition is None) == (args.example is None):
        parser.error("describe needs exactly one of DEFINITION or --example")

    try:
        config = RuntimeConfig.from_env()
    except ConfigurationError as e:
        print(f"Error in environment configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        machine = _load(args, config)
    except (DFAError, OSError) as e:
        print(f"Error loading machine: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "describe":
        print(ResultReporter.describe(machine))
        return EXIT_OK

    try:
        results = run_inputs(machine, args.inputs, separator=args.separator, trace=args.trace)

        report_content = ResultReporter.generate_report(
            machine,
            results,
            format=args.format,
            output=args.output
        )

        if not args.output or args.format == "console":
            print(report_content)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    if any(r.failed for r in results):
        return EXIT_INVALID_INPUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
