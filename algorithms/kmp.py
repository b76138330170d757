from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH
from match import Hit, Match
from utils import validate_inputs

# Separates pattern and base in the composite sequence; None never equals a str character
SENTINEL = None


def compute_prefix_function(sequence):
    """Longest proper prefix of sequence[:i+1] that is also its suffix, for every i.

    Returns (prefix_table, comparisons).
    """
    prefix = [0] * len(sequence)
    comparisons = 0
    for i in range(1, len(sequence)):
        j = prefix[i - 1]
        while True:
            comparisons += 1
            if sequence[i] == sequence[j]:
                j += 1
                break
            if j == 0:
                break
            j = prefix[j - 1]
        prefix[i] = j
    return prefix, comparisons


def kmp(base, pattern, sort_by_confidence=True, context_width=DEFAULT_CONTEXT_WIDTH):
    """Finds pattern in base with the Knuth-Morris-Pratt prefix function. O(n+m).

    The prefix function runs once over pattern + [SENTINEL] + base; wherever it
    reaches m the pattern ends at that position, which sits 2*m - 1 places past
    the hit's start in base (m pattern items, the sentinel, then m - 1 matched
    characters).
    """
    n, m = validate_inputs(base, pattern)
    if m > n:
        return Match(base, pattern, [], sort_by_confidence, context_width)

    composite = list(pattern) + [SENTINEL] + list(base)
    prefix, comparisons = compute_prefix_function(composite)

    hits = []
    for i in range(m + 1, len(composite)):
        if prefix[i] == m:
            hits.append(Hit(i - 2 * m, m))

    logger.debug(f"kmp: {len(hits)} hits for {pattern!r}, {comparisons} comparisons")
    return Match(base, pattern, hits, sort_by_confidence, context_width, comparisons)
