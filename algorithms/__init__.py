"""Substring search algorithms. Every function maps (base, pattern) to a Match."""

from .automaton import build_transition_table, finite_automaton
from .boyer_moore import boyer_moore, build_skip_table
from .kmp import compute_prefix_function, kmp
from .naive import naive
from .rabin_karp import rabin_karp
from .run_all import ALGORITHMS, DISPLAY_NAMES, run_all_algorithms

__all__ = [
    "naive",
    "rabin_karp",
    "kmp",
    "boyer_moore",
    "finite_automaton",
    "compute_prefix_function",
    "build_skip_table",
    "build_transition_table",
    "ALGORITHMS",
    "DISPLAY_NAMES",
    "run_all_algorithms",
]
