#!/usr/bin/env python3
"""
Example: building custom machines and loading one from a definition file.

Run from the repository root after `pip install -e .`:

    python examples/custom-machines/custom_machines.py
"""

import logging
from pathlib import Path

from dfa_toolkit import TransitionError, create_builder, load_machine
from dfa_toolkit.examples import Mod3Machine, length_mod3_machine


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("Example 1: Divisible by three")
    print("-" * 40)
    mod3 = Mod3Machine.create()
    for value in (0, 3, 5, 6, 9, 10, 21):
        binary = format(value, "b")
        verdict = "ACCEPT" if mod3.is_divisible_by_three(binary) else "REJECT"
        print(f"{value:>3} = '{binary}' -> {verdict}")

    print("\nExample 2: Strings starting with 'a' followed by any number of 'b'")
    print("-" * 40)
    ab_star = (create_builder("ab_star")
               .set_alphabet(["a", "b"])
               .add_state("q0")
               .add_state("q1", is_accepting=True)
               .add_state("q_err")
               .set_initial_state("q0")
               .add_transition("q0", "a", "q1")
               .add_transition("q0", "b", "q_err")
               .add_transition("q1", "a", "q_err")
               .add_transition("q1", "b", "q1")
               .add_transition("q_err", "a", "q_err")
               .add_transition("q_err", "b", "q_err")
               .build())
    for text in ("a", "ab", "abbb", "b", "aba", "q"):
        try:
            verdict = "ACCEPT" if ab_star.process(text) else "REJECT"
        except TransitionError as e:
            verdict = f"ERROR ({e})"
        print(f"'{text}' -> {verdict}")

    print("\nExample 3: Length multiple of 3")
    print("-" * 40)
    length_mod3 = length_mod3_machine()
    for text in ("", "a", "ab", "aaa", "abab", "aabbaa"):
        verdict = "ACCEPT" if length_mod3.process(text) else "REJECT"
        print(f"'{text}' (length: {len(text)}) -> {verdict}")

    print("\nExample 4: Traffic light from YAML, multi-character symbols")
    print("-" * 40)
    light = load_machine(Path(__file__).parent.parent / "traffic-light.yaml")
    for commands in (["tick", "tick", "tick"], ["tick", "fault", "clear", "tick"], ["tick"]):
        verdict = "ACCEPT" if light.process(commands) else "REJECT"
        path = " ; ".join(str(t) for t in light.trace(commands))
        print(f"{commands} -> {verdict}  [{path}]")


if __name__ == "__main__":
    main()
