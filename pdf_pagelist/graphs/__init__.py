"""Document graph implementations for PDF PageList."""

from .base import DocumentGraph
from .memory import MemoryGraph, MemoryObject, MemoryPage
from .pypdf_graph import PypdfGraph

__all__ = [
    "DocumentGraph",
    "MemoryGraph",
    "MemoryObject",
    "MemoryPage",
    "PypdfGraph",
]
