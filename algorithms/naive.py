from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH
from match import Hit, Match
from utils import validate_inputs


def naive(base, pattern, sort_by_confidence=True, context_width=DEFAULT_CONTEXT_WIDTH):
    """Finds every occurrence of pattern in base by trying each alignment. O((n-m+1)*m)."""
    n, m = validate_inputs(base, pattern)
    hits = []
    comparisons = 0

    for i in range(n - m + 1):
        j = 0
        while j < m:
            comparisons += 1
            if base[i + j] != pattern[j]:
                break
            j += 1
        if j == m:
            hits.append(Hit(i, m))

    logger.debug(f"naive: {len(hits)} hits for {pattern!r}, {comparisons} comparisons")
    return Match(base, pattern, hits, sort_by_confidence, context_width, comparisons)
