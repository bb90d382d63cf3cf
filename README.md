# moc

Small models of computation for experimenting with formal languages. The
package uses only the standard library.

- `moc.dfa.DFA`: deterministic finite automata. They can be read from and
  written to JFLAP (`.jff`) files.
- `moc.nfa.NFA`: nondeterministic finite automata.
- `moc.pda.PDA`: deterministic pushdown automata that accept by empty stack.
- `moc.core`: the shared pieces. These are `RunMode` (`NORMAL`, `VERBOSE`),
  the `AutomatonError` exception, the `DFAComponents` record and the JFLAP
  reader `parse_jff_file`.

Every automaton raises `moc.core.AutomatonError`, a subclass of
`RuntimeError`, when something goes wrong.

## Installation

```
pip install .
```

## Usage

### DFA

```python
from moc.core import RunMode
from moc.dfa import DFA

states = {"q0", "q1", "q2"}
alphabet = {"0", "1"}
delta = {
    ("q0", "0"): "q1", ("q0", "1"): "q0",
    ("q1", "0"): "q1", ("q1", "1"): "q2",
    ("q2", "0"): "q2", ("q2", "1"): "q2",
}
dfa = DFA(states, alphabet, delta, "q0", {"q2"})

dfa.run("0101")                  # True
dfa.reset()
dfa.run_multiple({"01", "11"}, RunMode.VERBOSE)  # False; prints each path and a summary
```

The constructor raises `AutomatonError` in three cases:

- the start state is not among the states;
- a final state is not among the states;
- a transition is missing for some state and symbol.

The DFA keeps its current state in `current_state`.

- `input(symbol)` consumes one symbol and returns the state it reaches. It
  raises `AutomatonError` for a symbol outside the alphabet.
- `run(word, mode=RunMode.NORMAL)` continues from the current state. It does
  not start over, so call `reset()` between words.
- `run_multiple(words, mode)` runs each distinct word in sorted order and
  resets after each one. It returns `True` only if every word is accepted.
- With `RunMode.VERBOSE` the path and the verdict are printed.

JFLAP files:

- `DFA.from_jff(path)` builds a DFA from a file through
  `moc.core.parse_jff_file`. It does not run the checks the constructor makes.
- `parse_jff_file` reads the `<state>` and `<transition>` elements under
  `<structure><automaton>`. A transition refers to a state by `"q" + id`, so
  state names should follow that pattern. It raises `AutomatonError` when the
  file cannot be loaded, or when some state lacks a transition on a symbol
  that appears in the file.
- `dfa.convert_to_jff(path="output.jff")` writes the automaton as a JFLAP
  file. States are numbered in sorted order.

### NFA

```python
from moc.core import RunMode
from moc.nfa import NFA

delta = {
    ("q0", "0"): {"q0", "q1"}, ("q0", "1"): {"q0"},
    ("q1", "0"): {"q1"},       ("q1", "1"): {"q1", "q2"},
    ("q2", "0"): {"q1"},       ("q2", "1"): {"q0", "q2"},
}
nfa = NFA({"q0", "q1", "q2"}, {"0", "1"}, delta, "q0", {"q2"})
nfa.run("01")  # True
```

The transition map does not need an entry for every state and symbol. A
missing entry leads nowhere.

The constructor raises `AutomatonError` for an invalid start state or final
state. It also raises it for a transition whose state, symbol or target lies
outside the automaton.

The NFA tracks its set of states in `current_states`. `run`, `run_multiple`
and `reset` behave as they do for the DFA.

### PDA

```python
from moc.pda import PDA

delta = {
    ("p", "a", "Z"): ("p", "ZA"),
    ("p", "a", "A"): ("p", "AA"),
    ("p", "b", "A"): ("p", ""),
    ("p", "c", "Z"): ("p", ""),
}
pda = PDA({"p"}, {"a", "b", "c"}, {"Z", "A"}, delta, "p", "Z", "p")
pda.run("aabbc")  # True
```

The PDA is built as `PDA(states, alphabet, stack_alphabet, delta, start, bottom, final)`.
The transition map goes from `(state, symbol, stack_top)` to
`(next_state, push_string)`.

- On every step the top of the stack is popped. The characters of the push
  string are then pushed in order, so the last one ends on top.
- A configuration with no transition moves to the state `""` and pushes
  nothing.
- A word is accepted when the stack is empty after its last symbol.
- Reading a symbol while the stack is already empty raises `AutomatonError`.
- `reset()` restores the start state with only `bottom` on the stack.
- `run_multiple` runs each distinct word in sorted order and resets after
  each one.

## Command line

```
moc [--jff PATH] [--output PATH]
```

This runs a demonstration in two parts.

1. It loads a DFA from `--jff`, which defaults to `example.jff` in the current
   directory. The file is expected to accept strings that contain `01`. The
   command runs the DFA verbosely on sample accepting and rejecting strings,
   then shows the errors raised for invalid input. Finally it saves the DFA
   to `--output`, which defaults to `output.jff`. If the file cannot be
   loaded, the error is reported on standard error.
2. It runs a sample NFA on fixed words, with no reset between them.

The same steps are available as `moc.cli.demo_dfa(jff_path, output_path)` and
`moc.cli.demo_nfa()`.

## Limitations

- Only the DFA can be read from or written to JFLAP files. The NFA and the
  PDA are built in code only.
- There is no conversion from an NFA to a DFA.
- `RunMode.VERBOSE` has no effect on the PDA.

## Running the tests

```
pip install .[test]
pytest
```