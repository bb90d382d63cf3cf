"""Pushdown automata that accept by empty stack."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from moc.core import AutomatonError, RunMode, State, Symbol

_NO_MOVE: tuple[State, str] = ("", "")


class PDA:
    """A deterministic pushdown automaton.

    The transition table maps ``(state, input symbol, stack top)`` to
    ``(next state, string to push)``. The top is popped on every step and
    the characters of the push string are pushed in order, so the last one
    ends up on top. A configuration with no transition moves to the empty
    state name and pushes nothing. A word is accepted when the stack is
    empty after the last symbol.
    """

    def __init__(
        self,
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        stack_alphabet: Iterable[Symbol],
        delta: Mapping[tuple[State, Symbol, Symbol], tuple[State, str]],
        start: State,
        bottom: Symbol,
        final: State,
    ):
        self.states: set[State] = set(states)
        self.alphabet: set[Symbol] = set(alphabet)
        self.stack_alphabet: set[Symbol] = set(stack_alphabet)
        self.delta: dict[tuple[State, Symbol, Symbol], tuple[State, str]] = dict(delta)
        self.start: State = start
        self.bottom: Symbol = bottom
        self.final: State = final
        self.stack: list[Symbol] = [bottom]
        self.current_state: State = start

    def run(self, word: str, mode: RunMode = RunMode.NORMAL) -> bool:
        """Feed a word from the current configuration; True if the stack empties.

        ``mode`` is accepted for a uniform interface with the other automata.
        """
        for symbol in word:
            if not self.stack:
                raise AutomatonError(
                    f"Stack is empty before input '{symbol}' in state "
                    f"{self.current_state}"
                )
            key = (self.current_state, symbol, self.stack[-1])
            self.current_state, pushed = self.delta.get(key, _NO_MOVE)
            self.stack.pop()
            self.stack.extend(pushed)
        return not self.stack

    def run_multiple(self, words: Iterable[str], mode: RunMode = RunMode.NORMAL) -> bool:
        """Run each distinct word, resetting after each; True if all are accepted."""
        all_accepted = True
        for word in sorted(set(words)):
            if not self.run(word, mode):
                all_accepted = False
            self.reset()
        return all_accepted

    def reset(self) -> None:
        """Return to the start state with only the bottom symbol on the stack."""
        self.stack = [self.bottom]
        self.current_state = self.start