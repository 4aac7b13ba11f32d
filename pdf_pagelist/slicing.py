"""Index and slice resolution against a live page count."""

from __future__ import annotations

import operator
from typing import NamedTuple

from .exceptions import PageIndexError


class SliceSpan(NamedTuple):
    """Concrete positions selected by a slice: ``start + i * step`` for ``i < length``."""

    start: int
    step: int
    length: int

    def positions(self) -> range:
        return range(self.start, self.start + self.step * self.length, self.step)


def coerce_index(index: object) -> int:
    """Return *index* as an ``int``, rejecting anything that is not integral."""

    try:
        return operator.index(index)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"page indices must be integers or slices, not {type(index).__name__}"
        ) from None


def normalize_index(index: object, count: int) -> int:
    """Resolve a possibly negative *index* into ``[0, count)``.

    Raises:
        PageIndexError: If the index is outside the document after
            negative indices have been wrapped once.
    """

    position = coerce_index(index)
    if position < 0:
        position += count
    if position < 0 or position >= count:
        raise PageIndexError("Accessing nonexistent PDF page number")
    return position


def resolve_slice(slc: slice, count: int) -> SliceSpan:
    """Resolve *slc* the way Python sequences do for a sequence of *count* items."""

    start, stop, step = slc.indices(count)
    return SliceSpan(start, step, len(range(start, stop, step)))


__all__ = ["SliceSpan", "coerce_index", "normalize_index", "resolve_slice"]
