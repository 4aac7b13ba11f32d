from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_pagelist.graphs.memory import MemoryGraph  # noqa: E402
from pdf_pagelist.holds import ForeignHoldRegistry  # noqa: E402
from pdf_pagelist.pagelist import PageList  # noqa: E402


@pytest.fixture()
def holds() -> ForeignHoldRegistry:
    return ForeignHoldRegistry()


@pytest.fixture()
def graph() -> MemoryGraph:
    return MemoryGraph.with_pages(["A", "B", "C"], name="target")


@pytest.fixture()
def donor() -> MemoryGraph:
    return MemoryGraph.with_pages(["X", "Y", "Z"], name="donor")


@pytest.fixture()
def pages(graph: MemoryGraph, holds: ForeignHoldRegistry) -> PageList:
    return PageList(graph, holds=holds)


@pytest.fixture()
def five_pages(holds: ForeignHoldRegistry) -> PageList:
    return PageList(MemoryGraph.with_pages(["A", "B", "C", "D", "E"]), holds=holds)


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[[str, Sequence[int]], Path]:
    def _create(filename: str, widths: Sequence[int]) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for width in widths:
            writer.add_blank_page(width=width, height=100)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[[str, Sequence[int]], Path]) -> Path:
    return pdf_factory("sample.pdf", [100, 200, 300])


@pytest.fixture()
def other_pdf(pdf_factory: Callable[[str, Sequence[int]], Path]) -> Path:
    return pdf_factory("other.pdf", [400, 500])
