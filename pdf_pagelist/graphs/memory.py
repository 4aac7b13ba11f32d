"""In-memory document graph.

``MemoryGraph`` keeps its objects in plain Python structures and follows the
same rules a PDF engine does: every object is owned by exactly one graph, a
page collection never holds the same indirect object twice, and pages taken
from another graph are resolved through that graph only when the document is
serialised. Objects refer to their owner weakly, so two graphs never keep each
other alive on their own.
"""

from __future__ import annotations

import itertools
import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..exceptions import (
    DanglingReferenceError,
    DuplicatePageError,
    GraphError,
    PageNotFoundError,
)

LOGGER = logging.getLogger("pdf_pagelist.graphs.memory")


@dataclass(eq=False)
class MemoryObject:
    """An indirect object owned by a :class:`MemoryGraph`."""

    objid: int
    _owner: Callable[[], Optional["MemoryGraph"]] = field(repr=False)

    @property
    def owner(self) -> Optional["MemoryGraph"]:
        return self._owner()


@dataclass(eq=False)
class MemoryPage(MemoryObject):
    """An indirect object tagged as a page."""

    label: str = ""


class MemoryGraph:
    """Document graph holding its pages and objects in memory."""

    def __init__(self, name: str = "document") -> None:
        self.name = name
        self.closed = False
        self._objects: Dict[int, MemoryObject] = {}
        self._pages: List[MemoryPage] = []
        self._objids = itertools.count(1)

    @classmethod
    def with_pages(cls, labels: Iterable[str], name: str = "document") -> "MemoryGraph":
        graph = cls(name)
        for label in labels:
            graph.add_page_at_end(graph.new_page(label))
        return graph

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"{len(self._pages)} pages"
        return f"<MemoryGraph {self.name!r} ({state})>"

    # ------------------------------------------------------------------
    # Object allocation
    # ------------------------------------------------------------------
    def new_page(self, label: Optional[str] = None) -> MemoryPage:
        self._check_open()
        objid = next(self._objids)
        page = MemoryPage(objid, weakref.ref(self), label or f"{self.name}:{objid}")
        self._objects[objid] = page
        return page

    def new_object(self) -> MemoryObject:
        self._check_open()
        objid = next(self._objids)
        obj = MemoryObject(objid, weakref.ref(self))
        self._objects[objid] = obj
        return obj

    # ------------------------------------------------------------------
    # DocumentGraph protocol
    # ------------------------------------------------------------------
    @property
    def ref(self) -> "MemoryGraph":
        return self

    def all_pages(self) -> List[MemoryPage]:
        return list(self._pages)

    def add_page_at(self, page: MemoryPage, before: bool, anchor: MemoryPage) -> None:
        self._check_open()
        self._reject_duplicate(page)
        position = self._position(anchor)
        self._pages.insert(position if before else position + 1, page)
        LOGGER.debug("Added %s at position %d of %s", page.label, position, self.name)

    def add_page_at_end(self, page: MemoryPage) -> None:
        self._check_open()
        self._reject_duplicate(page)
        self._pages.append(page)
        LOGGER.debug("Appended %s to %s", page.label, self.name)

    def remove_page(self, page: MemoryPage) -> None:
        self._check_open()
        del self._pages[self._position(page)]
        LOGGER.debug("Removed %s from %s", page.label, self.name)

    def make_indirect_copy(self, page: MemoryPage) -> MemoryPage:
        return self.new_page(page.label)

    def owning_graph(self, page: MemoryObject) -> Optional["MemoryGraph"]:
        return page.owner

    def is_page_object(self, obj: Any) -> bool:
        return isinstance(obj, MemoryPage)

    def same_page(self, first: Any, second: Any) -> bool:
        return first is second

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def resolve(self, page: MemoryPage) -> str:
        """Fetch the content of *page* from whichever graph owns it."""

        owner = page.owner
        if owner is None or owner.closed:
            raise DanglingReferenceError(
                f"Page {page.label!r} refers to a document that no longer exists"
            )
        return owner._objects[page.objid].label  # type: ignore[attr-defined]

    def serialize(self) -> List[str]:
        """Resolve every page in order, returning their labels."""

        self._check_open()
        return [self.resolve(page) for page in self._pages]

    def labels(self) -> List[str]:
        return [page.label for page in self._pages]

    def close(self) -> None:
        self._pages.clear()
        self._objects.clear()
        self.closed = True

    # ------------------------------------------------------------------
    def _check_open(self) -> None:
        if self.closed:
            raise GraphError(f"Document {self.name!r} is closed")

    def _position(self, page: MemoryPage) -> int:
        for position, candidate in enumerate(self._pages):
            if candidate is page:
                return position
        raise PageNotFoundError(f"Page {page.label!r} is not part of {self.name!r}")

    def _reject_duplicate(self, page: MemoryPage) -> None:
        if any(candidate is page for candidate in self._pages):
            raise DuplicatePageError(
                f"Page {page.label!r} is already present in {self.name!r}"
            )


__all__ = ["MemoryGraph", "MemoryObject", "MemoryPage"]
