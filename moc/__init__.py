"""Deterministic, nondeterministic and pushdown automata with JFLAP file support for DFAs."""

__version__ = "0.1.0"
__all__ = ["core", "dfa", "nfa", "pda", "cli"]