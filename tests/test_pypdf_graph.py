from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest
from pypdf import PdfReader, PdfWriter
from pypdf.generic import DictionaryObject

from pdf_pagelist import (
    DocumentGraph,
    EncryptedPDFError,
    InvalidPDFError,
    PageList,
    PageTypeError,
    PypdfGraph,
)
from pdf_pagelist.holds import ForeignHoldRegistry


def _widths(pages) -> list[int]:
    return [round(float(page.mediabox.width)) for page in pages]


def _saved_widths(doc: PypdfGraph, destination: Path) -> list[int]:
    doc.save(destination)
    return _widths(PdfReader(str(destination)).pages)


def test_open_reads_pages(sample_pdf: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    assert isinstance(doc, DocumentGraph)
    assert doc.ref is doc.writer
    assert "sample.pdf" in repr(doc)
    assert len(doc.pages) == 3
    assert _widths(doc.pages) == [100, 200, 300]
    assert doc.owning_graph(doc.pages[0]) is doc.writer


def test_open_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidPDFError, match="not found"):
        PypdfGraph.open(tmp_path / "missing.pdf")


def test_open_corrupted_file(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"this is not a pdf")
    with pytest.raises(InvalidPDFError):
        PypdfGraph.open(broken)


def test_open_encrypted_file(tmp_path: Path) -> None:
    path = tmp_path / "locked.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=100, height=100)
    writer.encrypt("secret")
    with path.open("wb") as handle:
        writer.write(handle)

    with pytest.raises(EncryptedPDFError):
        PypdfGraph.open(path)
    with pytest.raises(EncryptedPDFError):
        PypdfGraph.open(path, password="wrong")
    assert len(PypdfGraph.open(path, password="secret").pages) == 1


def test_reverse_round_trip(sample_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    doc.pages.reverse()
    assert _widths(doc.pages) == [300, 200, 100]
    assert _saved_widths(doc, tmp_path / "reversed.pdf") == [300, 200, 100]


def test_duplicate_page_gets_new_indirect_object(sample_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    pages = doc.pages
    pages.append(pages[0])

    assert len(pages) == 4
    idnums = [page.indirect_reference.idnum for page in pages]
    assert len(set(idnums)) == 4
    assert _saved_widths(doc, tmp_path / "dup.pdf") == [100, 200, 300, 100]


def test_insert_and_delete(sample_pdf: Path, other_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    other = PypdfGraph.open(other_pdf)
    holds = ForeignHoldRegistry()
    pages = PageList(doc, holds=holds)

    pages.insert(1, other.pages[1])
    assert _widths(pages) == [100, 500, 200, 300]
    assert holds.is_holding(doc.writer, other.writer)

    del pages[0]
    del pages[-1]
    assert _saved_widths(doc, tmp_path / "edited.pdf") == [500, 200]


def test_extend_across_documents(sample_pdf: Path, other_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    holds = ForeignHoldRegistry()
    pages = PageList(doc, holds=holds)
    pages.extend(PypdfGraph.open(other_pdf).pages)

    assert len(pages) == 5
    assert len(pages.foreign_holds) == 1
    assert _saved_widths(doc, tmp_path / "combined.pdf") == [100, 200, 300, 400, 500]


def test_slice_assignment(sample_pdf: Path, other_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    other = PypdfGraph.open(other_pdf)
    PageList(doc, holds=ForeignHoldRegistry())[0:2] = other.pages[:1]
    assert _saved_widths(doc, tmp_path / "sliced.pdf") == [400, 300]


def test_set_page_with_own_page(sample_pdf: Path, tmp_path: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    pages = doc.pages
    pages[0] = pages[2]
    assert _saved_widths(doc, tmp_path / "replaced.pdf") == [300, 200, 300]


def test_rejects_non_page_objects(sample_pdf: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    assert not doc.is_page_object(DictionaryObject())
    with pytest.raises(PageTypeError):
        doc.pages.append(DictionaryObject())
    assert len(doc.pages) == 3


def test_save_with_compression(monkeypatch: pytest.MonkeyPatch, sample_pdf: Path, tmp_path: Path) -> None:
    monkeypatch.setenv("PDF_PAGELIST_COMPRESS", "yes")
    doc = PypdfGraph.open(sample_pdf)
    output = doc.save(tmp_path / "nested" / "compressed.pdf")
    assert output.exists()
    assert len(PdfReader(str(output)).pages) == 3


def test_lookups_use_indirect_identity(pdf_factory: Callable[[str, Sequence[int]], Path]) -> None:
    doc = PypdfGraph.open(pdf_factory("identical.pdf", [100, 100, 100]))
    pages = doc.pages
    first, third = pages[0], pages[2]
    assert not doc.same_page(first, third)

    assert pages.index(third) == 2
    assert pages.count(third) == 1
    assert third in pages

    third_id = third.indirect_reference.idnum
    pages.remove(third)
    assert third not in pages
    assert first in pages
    assert third_id not in [page.indirect_reference.idnum for page in pages]
    assert first.indirect_reference.idnum in [page.indirect_reference.idnum for page in pages]


def test_lookups_distinguish_page_from_its_copy(sample_pdf: Path) -> None:
    doc = PypdfGraph.open(sample_pdf)
    pages = doc.pages
    original = pages[0]
    pages.append(original)
    copy = pages[-1]

    assert pages.count(original) == 1
    assert pages.index(copy) == 3
    pages.remove(copy)
    assert len(pages) == 3
    assert pages[0] is original or doc.same_page(pages[0], original)
    assert _widths(pages) == [100, 200, 300]
