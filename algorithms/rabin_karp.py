from math import gcd

from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH, HASH_MODULUS, HASH_RADIX
from match import Hit, Match
from utils import InvalidInput, validate_inputs


def rabin_karp(base, pattern, sort_by_confidence=True, context_width=DEFAULT_CONTEXT_WIDTH,
               pk=HASH_RADIX, modulus=HASH_MODULUS):
    """Finds pattern in base by comparing rolling hashes of every length-m window.

    The hash weighs the window's leftmost character by pk**0 and its rightmost by
    pk**(m-1), all modulo a prime. Sliding one position subtracts the outgoing
    character, adds the incoming one at weight pk**m and divides by pk, which
    modulo a prime is a multiplication by the inverse of pk. Every hash match
    is confirmed character by character, so collisions never produce hits.
    """
    n, m = validate_inputs(base, pattern)
    if modulus < 2 or gcd(pk, modulus) != 1:
        raise InvalidInput(f"radix {pk} has no inverse modulo {modulus}")
    if m > n:
        return Match(base, pattern, [], sort_by_confidence, context_width)

    hits = []
    comparisons = 0
    inverse = pow(pk, -1, modulus)

    pat_hash = 0
    win_hash = 0
    weight = 1
    for i in range(m):
        pat_hash = (pat_hash + ord(pattern[i]) * weight) % modulus
        win_hash = (win_hash + ord(base[i]) * weight) % modulus
        weight = (weight * pk) % modulus
    # weight == pk**m

    collisions = 0
    for i in range(n - m + 1):
        if win_hash == pat_hash:
            j = 0
            while j < m:
                comparisons += 1
                if base[i + j] != pattern[j]:
                    break
                j += 1
            if j == m:
                hits.append(Hit(i, m))
            else:
                collisions += 1
        if i < n - m:
            win_hash = (win_hash - ord(base[i]) + ord(base[i + m]) * weight) * inverse % modulus

    logger.debug(
        f"rabin_karp: {len(hits)} hits for {pattern!r}, {collisions} hash collisions, "
        f"{comparisons} comparisons"
    )
    return Match(base, pattern, hits, sort_by_confidence, context_width, comparisons)
