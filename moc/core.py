"""Shared types and the JFLAP (.jff) reader used by the automata."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

State = str
Symbol = str


class RunMode(enum.Enum):
    """How much an automaton reports while it runs."""

    NORMAL = "normal"
    VERBOSE = "verbose"


class AutomatonError(RuntimeError):
    """Raised for invalid automata, inputs or files."""


@dataclass
class DFAComponents:
    """The five parts of a deterministic finite automaton."""

    states: set[State] = field(default_factory=set)
    alphabet: set[Symbol] = field(default_factory=set)
    delta: dict[tuple[State, Symbol], State] = field(default_factory=dict)
    start: State = ""
    finals: set[State] = field(default_factory=set)


def _text(element: ET.Element, tag: str) -> str:
    return element.findtext(tag) or ""


def parse_jff_file(filename) -> DFAComponents:
    """Read a JFLAP finite-automaton file into DFA components.

    Transitions refer to states as ``"q" + id``. Every state must have a
    transition on every symbol that appears in the file.
    """
    try:
        tree = ET.parse(filename)
    except (OSError, ET.ParseError) as exc:
        raise AutomatonError("Failed to load JFF file") from exc

    components = DFAComponents()
    root = tree.getroot()
    automaton = root.find("automaton") if root.tag == "structure" else None
    if automaton is None:
        return components

    for state in automaton.iter("state"):
        if state not in list(automaton):
            continue
        name = state.get("name", "")
        components.states.add(name)
        if state.find("initial") is not None:
            components.start = name
        if state.find("final") is not None:
            components.finals.add(name)

    for transition in automaton.findall("transition"):
        source = _text(transition, "from")
        target = _text(transition, "to")
        symbol = _text(transition, "read")[:1]
        components.alphabet.add(symbol)
        components.delta[("q" + source, symbol)] = "q" + target

    for state in sorted(components.states):
        for symbol in sorted(components.alphabet):
            if (state, symbol) not in components.delta:
                raise AutomatonError(
                    f"Missing transition for state {state} and symbol {symbol}"
                )

    return components