"""Deterministic finite automata."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from moc.core import AutomatonError, RunMode, State, Symbol, parse_jff_file


class DFA:
    """A deterministic finite automaton that remembers its current state."""

    def __init__(
        self,
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        delta: Mapping[tuple[State, Symbol], State],
        start: State,
        finals: Iterable[State],
    ):
        states = set(states)
        alphabet = set(alphabet)
        finals = set(finals)
        if start not in states:
            raise AutomatonError("Invalid start state")
        if not finals <= states:
            raise AutomatonError("Invalid final states")
        for state in sorted(states):
            for symbol in sorted(alphabet):
                if (state, symbol) not in delta:
                    raise AutomatonError(
                        f"Missing transition for state {state} and symbol {symbol}"
                    )
        self._assign(states, alphabet, dict(delta), start, finals)

    def _assign(self, states, alphabet, delta, start, finals) -> None:
        self.states: set[State] = states
        self.alphabet: set[Symbol] = alphabet
        self.delta: dict[tuple[State, Symbol], State] = delta
        self.start: State = start
        self.finals: set[State] = finals
        self.current_state: State = start

    @classmethod
    def from_jff(cls, path) -> "DFA":
        """Build a DFA from a JFLAP file."""
        try:
            components = parse_jff_file(path)
        except AutomatonError as exc:
            raise AutomatonError(f"Failed to create DFA from JFF file: {exc}") from exc
        dfa = cls.__new__(cls)
        dfa._assign(
            components.states,
            components.alphabet,
            components.delta,
            components.start,
            components.finals,
        )
        return dfa

    def input(self, symbol: Symbol) -> State:
        """Consume one symbol and return the state reached."""
        if symbol not in self.alphabet:
            raise AutomatonError(f"Symbol '{symbol}' not in alphabet")
        key = (self.current_state, symbol)
        if key not in self.delta:
            raise AutomatonError(
                f"No transition defined for state {self.current_state} "
                f"and symbol {symbol}"
            )
        self.current_state = self.delta[key]
        return self.current_state

    def run(self, word: str, mode: RunMode = RunMode.NORMAL) -> bool:
        """Feed a word from the current state; return whether it ends accepting."""
        verbose = mode is RunMode.VERBOSE
        if verbose:
            print(f"Starting state: {self.current_state}")
        for symbol in word:
            try:
                next_state = self.input(symbol)
            except AutomatonError as exc:
                raise AutomatonError(
                    f"Error processing input '{symbol}': {exc}"
                ) from exc
            if verbose:
                print(f"Input: {symbol} -> State: {next_state}")
        accepted = self.current_state in self.finals
        if verbose:
            verdict = "accepted" if accepted else "rejected"
            print(f"Final state: {self.current_state} ({verdict})")
        return accepted

    def run_multiple(self, words: Iterable[str], mode: RunMode = RunMode.NORMAL) -> bool:
        """Run each distinct word from the start state; True if all are accepted."""
        verbose = mode is RunMode.VERBOSE
        unique = sorted(set(words))
        accepted = 0
        for word in unique:
            if verbose:
                print(f"\nProcessing string: {word}")
                print("------------------------")
            if self.run(word, mode):
                accepted += 1
            self.reset()
        if verbose:
            print("\nSummary:")
            print("--------")
            print(f"Total strings: {len(unique)}")
            print(f"Accepted: {accepted}")
            print(f"Rejected: {len(unique) - accepted}")
        return accepted == len(unique)

    def convert_to_jff(self, path="output.jff") -> None:
        """Write the automaton as a JFLAP file."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
            "<structure>",
            "\t<type>fa</type>",
            "\t<automaton>",
            "\t\t<!--The list of states.-->",
        ]
        state_ids: dict[State, int] = {}
        for state_id, state in enumerate(sorted(self.states)):
            state_ids[state] = state_id
            lines.append(f'\t\t<state id="{state_id}" name="{state}">')
            lines.append(f"\t\t\t<x>{100 + state_id * 100}</x>")
            lines.append(f"\t\t\t<y>{100 + (state_id % 2) * 50}</y>")
            if state == self.start:
                lines.append("\t\t\t<initial/>")
            if state in self.finals:
                lines.append("\t\t\t<final/>")
            lines.append("\t\t</state>")

        lines.append("\t\t<!--The list of transitions.-->")
        for (source, symbol), target in self.delta.items():
            lines.append("\t\t<transition>")
            lines.append(f"\t\t\t<from>{state_ids.get(source, 0)}</from>")
            lines.append(f"\t\t\t<to>{state_ids.get(target, 0)}</to>")
            lines.append(f"\t\t\t<read>{symbol}</read>")
            lines.append("\t\t</transition>")
        lines.append("\t</automaton>")
        lines.append("</structure>")

        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise AutomatonError("Failed to create JFF file") from exc

    def reset(self) -> None:
        """Return to the start state."""
        self.current_state = self.start