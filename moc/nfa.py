"""Nondeterministic finite automata."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from moc.core import AutomatonError, RunMode, State, Symbol


class NFA:
    """A nondeterministic finite automaton tracking its set of current states."""

    def __init__(
        self,
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        delta: Mapping[tuple[State, Symbol], Iterable[State]],
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
        table: dict[tuple[State, Symbol], frozenset[State]] = {}
        for (source, symbol), targets in delta.items():
            targets = frozenset(targets)
            if source not in states or symbol not in alphabet:
                raise AutomatonError("Invalid Transition function")
            if not targets <= states:
                raise AutomatonError("Invalid Transition function")
            table[(source, symbol)] = targets

        self.states: set[State] = states
        self.alphabet: set[Symbol] = alphabet
        self.delta = table
        self.start: State = start
        self.finals: set[State] = finals
        self.current_states: set[State] = {start}

    @staticmethod
    def _listing(states: Iterable[State]) -> str:
        return "".join(f"{state} " for state in sorted(states))

    def run(self, word: str, mode: RunMode = RunMode.NORMAL) -> bool:
        """Feed a word from the current states; True if any final state is reached."""
        verbose = mode is RunMode.VERBOSE
        if verbose:
            print(f"Starting states: {self._listing(self.current_states)}")
        for symbol in word:
            if verbose:
                print(f"Input: {symbol}")
            self.current_states = {
                target
                for state in self.current_states
                for target in self.delta.get((state, symbol), ())
            }
            if verbose:
                print(f"State Transitions{self._listing(self.current_states)}")
        accepted = not self.current_states.isdisjoint(self.finals)
        if verbose:
            print(f"Final states: {self._listing(self.current_states)}")
            print(f"Result: {'accepted' if accepted else 'rejected'}")
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

    def reset(self) -> None:
        """Return to the start state."""
        self.current_states = {self.start}