from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH
from match import Hit, Match
from utils import validate_inputs


def build_skip_table(pattern):
    """Maps each character of pattern to the distance from its last occurrence to the end.

    Characters absent from the table skip the full pattern length.
    """
    m = len(pattern)
    # later occurrences overwrite earlier ones
    return {char: m - 1 - index for index, char in enumerate(pattern)}


def boyer_moore(base, pattern, sort_by_confidence=True, context_width=DEFAULT_CONTEXT_WIDTH):
    """Finds pattern in base with Boyer-Moore's bad-character rule (no good-suffix rule)."""
    n, m = validate_inputs(base, pattern)
    if m > n:
        return Match(base, pattern, [], sort_by_confidence, context_width)

    skip = build_skip_table(pattern)
    hits = []
    comparisons = 0
    shifts = 0

    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0:
            comparisons += 1
            if base[s + j] != pattern[j]:
                break
            j -= 1

        if j < 0:
            hits.append(Hit(s, m))
            s += 1
        else:
            # align the mismatching base character with its last occurrence in pattern
            s += max(1, skip.get(base[s + j], m) - (m - 1 - j))
        shifts += 1

    logger.debug(
        f"boyer_moore: {len(hits)} hits for {pattern!r}, {shifts} alignments, {comparisons} comparisons"
    )
    return Match(base, pattern, hits, sort_by_confidence, context_width, comparisons)
