import time

from loguru import logger

from config import DEFAULT_CONTEXT_WIDTH
from utils import InvalidInput
from .automaton import finite_automaton
from .boyer_moore import boyer_moore
from .kmp import kmp
from .naive import naive
from .rabin_karp import rabin_karp

ALGORITHMS = {
    "naive": naive,
    "rabin-karp": rabin_karp,
    "kmp": kmp,
    "boyer-moore": boyer_moore,
    "automaton": finite_automaton,
}

DISPLAY_NAMES = {
    "naive": "Naive",
    "rabin-karp": "Rabin-Karp",
    "kmp": "Knuth-Morris-Pratt (KMP)",
    "boyer-moore": "Boyer-Moore",
    "automaton": "Finite Automaton",
}


def run_all_algorithms(base: str, pattern: str, names: list[str] = None, sort_by_confidence: bool = True,
                       context_width: int = DEFAULT_CONTEXT_WIDTH) -> list[dict]:
    """Runs each selected algorithm on the same input and times it."""
    if names is None:
        names = list(ALGORITHMS)
    unknown = [name for name in names if name not in ALGORITHMS]
    if unknown:
        raise InvalidInput(f"unknown algorithm(s): {', '.join(unknown)}")

    results = []
    for name in names:
        start = time.perf_counter()
        match = ALGORITHMS[name](base, pattern, sort_by_confidence, context_width)
        elapsed_ms = (time.perf_counter() - start) * 1000

        results.append({
            "key": name,
            "name": DISPLAY_NAMES[name],
            "time": elapsed_ms,
            "comparisons": match.comparisons,
            "hits": len(match.hits),
            "match": match,
        })
        logger.info(f"{DISPLAY_NAMES[name]}: {len(match.hits)} hits in {elapsed_ms:.4f} ms")

    return results
