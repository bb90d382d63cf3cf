"""Command that exercises the DFA and NFA on sample inputs."""

from __future__ import annotations

import argparse
import sys

from moc.core import AutomatonError, RunMode
from moc.dfa import DFA
from moc.nfa import NFA

_RULE = "------------------------"


def demo_dfa(jff_path="example.jff", output_path="output.jff") -> bool:
    """Load a DFA accepting strings containing '01' and exercise it.

    Returns True when the demonstration completed, False if it failed.
    """
    print("\nTesting DFA from JFF file:")
    print(_RULE)
    try:
        dfa = DFA.from_jff(jff_path)
        print("Testing DFA that accepts strings containing '01'")

        accept_tests = {"01", "0001", "1101", "010", "0101", "11011"}
        reject_tests = {"0", "1", "00", "11", "000", "111"}

        print("\nTesting accepting strings:")
        print(_RULE)
        dfa.run_multiple(accept_tests, RunMode.VERBOSE)

        print("\nTesting rejecting strings:")
        print(_RULE)
        dfa.run_multiple(reject_tests, RunMode.VERBOSE)

        print("\nTesting invalid inputs:")
        print(_RULE)
        for word in ("01a", "2"):
            try:
                dfa.run(word, RunMode.VERBOSE)
            except AutomatonError as exc:
                print(f"Expected error: {exc}")

        dfa.convert_to_jff(output_path)
        print(f"\nDFA has been saved to {output_path}")
    except AutomatonError as exc:
        print(f"Error in DFA test: {exc}", file=sys.stderr)
        return False
    return True


def demo_nfa() -> dict[str, bool]:
    """Run a sample NFA on fixed words without resetting between them.

    Returns the verdict for each word.
    """
    print("\nTesting NFA:")
    print("------------")
    results: dict[str, bool] = {}
    try:
        delta = {
            ("q0", "0"): {"q0", "q1"},
            ("q0", "1"): {"q0"},
            ("q1", "0"): {"q1"},
            ("q1", "1"): {"q1", "q2"},
            ("q2", "0"): {"q1"},
            ("q2", "1"): {"q0", "q2"},
        }
        nfa = NFA({"q0", "q1", "q2"}, {"0", "1"}, delta, "q0", {"q2"})

        accept = {"01", "0011", "1111", "011"}
        reject = {"0", "10", "110", "000"}

        for heading, words in (
            ("Testing accepting strings:", accept),
            ("\nTesting rejecting strings:", reject),
        ):
            print(heading)
            for word in sorted(words):
                verdict = nfa.run(word, RunMode.VERBOSE)
                results[word] = verdict
                print(f"String '{word}': {'Accepted' if verdict else 'Rejected'}")
    except AutomatonError as exc:
        print(f"Error in NFA test: {exc}", file=sys.stderr)
    return results


def main(argv=None) -> int:
    """Run both demonstrations."""
    parser = argparse.ArgumentParser(
        prog="moc", description="Exercise the finite automata on sample inputs."
    )
    parser.add_argument("--jff", default="example.jff", help="JFLAP file to load")
    parser.add_argument(
        "--output", default="output.jff", help="where to save the loaded DFA"
    )
    args = parser.parse_args(argv)
    demo_dfa(args.jff, args.output)
    demo_nfa()
    return 0


if __name__ == "__main__":
    sys.exit(main())