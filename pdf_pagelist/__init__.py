"""
PDF PageList - list-like editing of the pages of a PDF document.

A :class:`PageList` is a mutable sequence view over the pages of a document
graph. Pages can be read, replaced, inserted, deleted, sliced, reversed and
concatenated with plain list syntax while the document keeps every page
object unique and keeps borrowed pages' source documents alive.

Quick Start:
    >>> from pdf_pagelist import PypdfGraph
    >>> doc = PypdfGraph.open('input.pdf')
    >>> doc.pages.reverse()
    >>> doc.save('reversed.pdf')

Main Classes:
    - PageList: Mutable sequence view over a document's pages
    - PypdfGraph: Document graph backed by pypdf
    - MemoryGraph: In-memory document graph
    - ForeignHoldRegistry: Keeps foreign documents alive

Exceptions:
    - PageListError: Base exception
    - PageIndexError: Page index or ordinal out of range
    - PageTypeError: Non-page object supplied
    - SliceLengthError: Extended slice assigned the wrong number of pages
    - ConcurrentModificationError: Source changed while extending

For CLI usage, use the 'pdf-pagelist' command after installation.
"""

# Core classes
from pdf_pagelist.pagelist import PageList
from pdf_pagelist.holds import ForeignHoldRegistry, default_registry
from pdf_pagelist.graphs import DocumentGraph, MemoryGraph, MemoryPage, PypdfGraph

# Exceptions
from pdf_pagelist.exceptions import (
    PageListError,
    PageIndexError,
    PageTypeError,
    SliceLengthError,
    ConcurrentModificationError,
    GraphError,
    DuplicatePageError,
    PageNotFoundError,
    DanglingReferenceError,
    InvalidPDFError,
    EncryptedPDFError,
)

# Utility functions
from pdf_pagelist.utils import configure_logging, parse_page_spec

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PageList",
    "ForeignHoldRegistry",
    "default_registry",
    "DocumentGraph",
    "MemoryGraph",
    "MemoryPage",
    "PypdfGraph",
    # Exceptions
    "PageListError",
    "PageIndexError",
    "PageTypeError",
    "SliceLengthError",
    "ConcurrentModificationError",
    "GraphError",
    "DuplicatePageError",
    "PageNotFoundError",
    "DanglingReferenceError",
    "InvalidPDFError",
    "EncryptedPDFError",
    # Utility functions
    "configure_logging",
    "parse_page_spec",
    # Version info
    "__version__",
]
