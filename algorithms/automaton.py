from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH
from match import Hit, Match
from utils import validate_inputs
from .kmp import compute_prefix_function


def build_transition_table(pattern):
    """Builds the string-matching automaton for pattern.

    table[q][c] is the state reached from state q (q characters matched) on
    reading c. Only characters of pattern are stored; any other character
    leads back to state 0.
    """
    m = len(pattern)
    prefix, _ = compute_prefix_function(pattern)
    alphabet = sorted(set(pattern))

    table = [dict() for _ in range(m + 1)]
    for q in range(m + 1):
        for c in alphabet:
            if q < m and c == pattern[q]:
                table[q][c] = q + 1
            elif q == 0:
                table[q][c] = 0
            else:
                table[q][c] = table[prefix[q - 1]][c]
    return table


def finite_automaton(base, pattern, sort_by_confidence=True, context_width=DEFAULT_CONTEXT_WIDTH):
    """Finds pattern in base by feeding base through the pattern's matching automaton. O(n)."""
    n, m = validate_inputs(base, pattern)
    if m > n:
        return Match(base, pattern, [], sort_by_confidence, context_width)

    table = build_transition_table(pattern)
    hits = []
    comparisons = 0

    state = 0
    for i, char in enumerate(base):
        comparisons += 1
        state = table[state].get(char, 0)
        if state == m:
            hits.append(Hit(i - m + 1, m))

    logger.debug(f"finite_automaton: {len(hits)} hits for {pattern!r}, {comparisons} transitions")
    return Match(base, pattern, hits, sort_by_confidence, context_width, comparisons)
