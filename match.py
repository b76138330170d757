# match.py
# Result model shared by every search algorithm: Hit records and the Match report.

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Optional, Sequence, Tuple

from config import DEFAULT_CONTEXT_WIDTH, ELLIPSIS
from utils import InvalidInput


@dataclass(frozen=True)
class Hit:
    """One located occurrence of the pattern inside the base string."""
    start: int
    length: int
    confidence: float = 1.0

    def __post_init__(self):
        if self.start < 0:
            raise InvalidInput(f"hit start must be non-negative, got {self.start}")
        if self.length <= 0:
            raise InvalidInput(f"hit length must be positive, got {self.length}")
        if not 0.0 <= self.confidence <= 1.0:
            raise InvalidInput(f"hit confidence must be within [0, 1], got {self.confidence}")

    @property
    def end(self):
        return self.start + self.length


def _order_hits(hits, sort_by_confidence):
    # sorted() is stable, so equal confidences keep discovery order
    if sort_by_confidence:
        return tuple(sorted(hits, key=attrgetter("confidence"), reverse=True))
    return tuple(hits)


@dataclass(frozen=True)
class Match:
    """Immutable report of every hit one algorithm found for one (base, pattern) pair.

    sort_by_confidence has no default: each call site decides whether hits are
    listed by descending confidence or in the order they were discovered.
    """
    base: str
    pattern: str
    hits: Tuple[Hit, ...]
    sort_by_confidence: bool
    context_width: int = DEFAULT_CONTEXT_WIDTH
    comparisons: int = 0
    _discovered: Tuple[Hit, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.context_width < 0:
            raise InvalidInput(f"context width must be non-negative, got {self.context_width}")
        for hit in self.hits:
            if hit.end > len(self.base):
                raise InvalidInput(
                    f"hit [{hit.start}, {hit.end}) runs past the end of a base of length {len(self.base)}"
                )
        object.__setattr__(self, "_discovered", tuple(self.hits))
        object.__setattr__(self, "hits", _order_hits(self._discovered, self.sort_by_confidence))

    @property
    def starts(self):
        return [hit.start for hit in self.hits]

    def _context(self, hit, width):
        """Returns the (before, after) windows around a hit, clipped to the base."""
        n = len(self.base)
        before_start = hit.start - width
        if before_start > 0:
            before = ELLIPSIS + self.base[before_start:hit.start]
        else:
            before = self.base[0:hit.start]

        after_end = hit.end + width
        if after_end < n:
            after = self.base[hit.end:after_end] + ELLIPSIS
        else:
            after = self.base[hit.end:n]
        return before, after

    def render(self, context_width: Optional[int] = None, sort_by_confidence: Optional[bool] = None) -> str:
        """Formats the report; explicit arguments override the stored rendering policy."""
        width = self.context_width if context_width is None else context_width
        if width < 0:
            raise InvalidInput(f"context width must be non-negative, got {width}")
        ordered = self.sort_by_confidence if sort_by_confidence is None else sort_by_confidence
        hits: Sequence[Hit] = self.hits
        if ordered != self.sort_by_confidence:
            hits = _order_hits(self._discovered, ordered)

        lines = [
            f'string = "{self.base}";',
            f'pattern = "{self.pattern}", {len(hits)} hits produced ({"sorted" if ordered else "unsorted"})',
        ]
        for hit in hits:
            before, after = self._context(hit, width)
            lines.append(
                f"hit ({hit.confidence * 100:g}%, pos {hit.start} to {hit.end}): "
                f"{before}<{self.base[hit.start:hit.end]}>{after}"
            )
        return "\n".join(lines)

    def __str__(self):
        return self.render()
