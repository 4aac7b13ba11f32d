"""List-like access to the pages of a document graph."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Iterable, List, Optional, Tuple, Union

from .exceptions import ConcurrentModificationError, PageIndexError, PageTypeError, SliceLengthError
from .graphs.base import DocumentGraph
from .holds import ForeignHoldRegistry, default_registry
from .slicing import coerce_index, normalize_index, resolve_slice

LOGGER = logging.getLogger("pdf_pagelist.pagelist")

IndexLike = Union[int, slice]


class PageList(MutableSequence):
    """A mutable sequence view over the pages of one document graph.

    The view owns nothing: the page count and ordering are read from the
    graph on every call. Mutations are expressed as single-page insertions
    and removals against the graph.

    Two rules hold for every insertion:

    * a page already owned by the bound graph is copied into a fresh
      indirect object first, so the same object never appears twice;
    * a page owned by another graph places a hold on that graph, since it
      may be read back from its owner when the bound graph is written.

    Iteration re-reads the page count at each step and is therefore weakly
    consistent: mutating the document while iterating changes which pages
    are visited.
    """

    def __init__(
        self,
        graph: DocumentGraph,
        iterpos: int = 0,
        *,
        holds: Optional[ForeignHoldRegistry] = None,
    ) -> None:
        self._graph = graph
        self._holds = holds if holds is not None else default_registry
        self.iterpos = iterpos
        self._cursor = False

    @property
    def graph(self) -> DocumentGraph:
        return self._graph

    def __repr__(self) -> str:
        return f"<PageList of {self._graph!r}: {len(self)} pages>"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._graph.all_pages())

    def get_page(self, index: int) -> Any:
        pages = self._graph.all_pages()
        return pages[normalize_index(index, len(pages))]

    def get_pages(self, slc: slice) -> List[Any]:
        span = resolve_slice(slc, len(self))
        return [self.get_page(position) for position in span.positions()]

    def __getitem__(self, index: IndexLike) -> Any:
        if isinstance(index, slice):
            return self.get_pages(index)
        return self.get_page(index)

    def p(self, pnum: int) -> Any:
        """Look up a page by ordinal number; ``p(1)`` is the first page."""

        pnum = coerce_index(pnum)
        if pnum <= 0:
            raise PageIndexError("can't access page 0 in 1-based indexing")
        return self.get_page(pnum - 1)

    # ------------------------------------------------------------------
    # Primitive mutations
    # ------------------------------------------------------------------
    def _require_page(self, obj: Any) -> None:
        if not self._graph.is_page_object(obj):
            raise PageTypeError("only pages can be inserted")

    def insert_page(self, index: int, page: Any) -> None:
        """Place *page* before the page at *index*, or append at ``len(self)``."""

        self._require_page(page)
        count = len(self)
        index = coerce_index(index)
        anchor = None if index == count else self.get_page(index)

        owner = self._graph.owning_graph(page)
        if owner is self._graph.ref:
            LOGGER.debug("Page already belongs to this document; inserting an indirect copy")
            page = self._graph.make_indirect_copy(page)
        elif owner is not None:
            self._holds.acquire(self._graph.ref, owner)

        if anchor is None:
            self._graph.add_page_at_end(page)
            LOGGER.debug("Appended page at position %d", count)
        else:
            self._graph.add_page_at(page, True, anchor)
            LOGGER.debug("Inserted page before position %d", index)

    def delete_page(self, index: int) -> None:
        # Foreign holds stay in place: the removed page may have been written
        # already, and other pages may still come from the same owner.
        page = self.get_page(index)
        self._graph.remove_page(page)
        LOGGER.debug("Deleted page at position %d", index)

    def set_page(self, index: int, page: Any) -> None:
        """Replace the page at *index*; ``index == len(self)`` appends instead."""

        count = len(self)
        index = coerce_index(index)
        if index < 0:
            index = normalize_index(index, count)
        self.insert_page(index, page)
        if index != count:
            self.delete_page(index + 1)

    def set_pages(self, slc: slice, pages: Iterable[Any]) -> None:
        span = resolve_slice(slc, len(self))
        results = list(pages)
        for page in results:
            self._require_page(page)

        if span.step != 1:
            if len(results) != span.length:
                raise SliceLengthError(len(results), span.length)
            for position, page in zip(span.positions(), results):
                self.set_page(position, page)
            return

        # Insert everything first so no page still referenced by the source is
        # removed, then prune the originals that were pushed past the new ones.
        for offset, page in enumerate(results):
            self.insert_page(span.start + offset, page)
        del_start = span.start + len(results)
        for _ in range(span.length):
            self.delete_page(del_start)

    def __setitem__(self, index: IndexLike, value: Any) -> None:
        if isinstance(index, slice):
            self.set_pages(index, value)
        else:
            self.set_page(index, value)

    def __delitem__(self, index: IndexLike) -> None:
        if isinstance(index, slice):
            span = resolve_slice(index, len(self))
            for position in sorted(span.positions(), reverse=True):
                self.delete_page(position)
        else:
            self.delete_page(index)

    # ------------------------------------------------------------------
    # List API
    # ------------------------------------------------------------------
    def insert(self, index: int, page: Any) -> None:
        self.insert_page(index, page)

    def append(self, page: Any) -> None:
        self.insert_page(len(self), page)

    def extend(self, other: Union["PageList", Iterable[Any]]) -> None:
        if isinstance(other, PageList):
            other_count = len(other)
            for position in range(other_count):
                if other_count != len(other):
                    raise ConcurrentModificationError("source page list modified during iteration")
                self.insert_page(len(self), other.get_page(position))
            return

        for page in other:
            self._require_page(page)
            self.insert_page(len(self), page)

    def reverse(self) -> None:
        reversed_pages = self.get_pages(slice(None, None, -1))
        self.set_pages(slice(0, len(self), 1), reversed_pages)

    # Lookups match the underlying indirect object, never page contents:
    # two blank pages of the same size are equal dictionaries but different
    # pages.
    def index(self, page: Any, start: int = 0, stop: Optional[int] = None) -> int:
        pages = self._graph.all_pages()
        for position in range(*slice(start, stop).indices(len(pages))):
            if self._graph.same_page(pages[position], page):
                return position
        raise ValueError("page is not in page list")

    def count(self, page: Any) -> int:
        return sum(1 for candidate in self._graph.all_pages() if self._graph.same_page(candidate, page))

    def __contains__(self, page: Any) -> bool:
        return any(self._graph.same_page(candidate, page) for candidate in self._graph.all_pages())

    def remove(self, page: Any) -> None:
        self.delete_page(self.index(page))

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def __iter__(self) -> "PageList":
        if self._cursor:
            return self
        cursor = PageList(self._graph, 0, holds=self._holds)
        cursor._cursor = True
        return cursor

    def __next__(self) -> Any:
        if self.iterpos < len(self):
            page = self.get_page(self.iterpos)
            self.iterpos += 1
            return page
        raise StopIteration

    # ------------------------------------------------------------------
    # Foreign holds
    # ------------------------------------------------------------------
    @property
    def foreign_holds(self) -> Tuple[Any, ...]:
        """Foreign documents currently kept alive on behalf of this document."""

        return self._holds.holds_for(self._graph.ref)

    def release_holds(self) -> int:
        """Drop every foreign hold of the bound document.

        Only safe once the bound document has been written, or once no page
        borrowed from another document remains in it.
        """

        return self._holds.release(self._graph.ref)


__all__ = ["PageList"]
