"""Protocol for the document graphs a page list operates on."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DocumentGraph(Protocol):
    """Primitive page operations a document engine must provide.

    ``ref`` identifies the graph; it is what :meth:`owning_graph` returns for
    pages the graph owns, and what foreign holds are keyed on.
    """

    @property
    def ref(self) -> Any:
        """The object identifying this graph as a page owner."""

    def all_pages(self) -> List[Any]:
        """Return the pages in document order."""

    def add_page_at(self, page: Any, before: bool, anchor: Any) -> None:
        """Place *page* immediately before (or after) *anchor*."""

    def add_page_at_end(self, page: Any) -> None:
        """Append *page* to the document."""

    def remove_page(self, page: Any) -> None:
        """Remove *page* from the page collection."""

    def make_indirect_copy(self, page: Any) -> Any:
        """Return a new indirect page object in this graph copying *page*."""

    def owning_graph(self, page: Any) -> Optional[Any]:
        """Return the ``ref`` of the graph owning *page*, or ``None``."""

    def is_page_object(self, obj: Any) -> bool:
        """Return ``True`` if *obj* is a page this engine understands."""

    def same_page(self, first: Any, second: Any) -> bool:
        """Return ``True`` if both handles refer to the same indirect object."""
