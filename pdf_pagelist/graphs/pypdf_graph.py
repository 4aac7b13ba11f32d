"""pypdf-backed document graph."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import NameObject

from ..exceptions import EncryptedPDFError, InvalidPDFError, PageNotFoundError
from ..utils import compression_enabled

LOGGER = logging.getLogger("pdf_pagelist.graphs.pypdf")


class PypdfGraph:
    """Document graph wrapping a :class:`pypdf.PdfWriter`.

    Pages are identified by their indirect reference. A page whose indirect
    reference points at this writer is owned by the graph; pages read from any
    other reader or writer are foreign until pypdf clones them in.
    """

    def __init__(self, writer: Optional[PdfWriter] = None, *, source: Optional[Path] = None) -> None:
        self.writer = writer if writer is not None else PdfWriter()
        self.source = source

    @classmethod
    def open(cls, pdf_path: Union[str, Path], password: Optional[str] = None) -> "PypdfGraph":
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            LOGGER.error("Failed to read PDF %s: %s", path, exc)
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            LOGGER.error("Failed to read PDF %s: %s", path, exc)
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        writer = PdfWriter(clone_from=reader)
        LOGGER.debug("Opened %s with %d pages", path, len(writer.pages))
        return cls(writer, source=path)

    def __repr__(self) -> str:
        name = self.source.name if self.source is not None else "untitled"
        return f"<PypdfGraph {name!r}>"

    @property
    def pages(self):
        from ..pagelist import PageList

        return PageList(self)

    def save(self, destination: Union[str, Path]) -> Path:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        if compression_enabled():
            for page in self.writer.pages:
                page.compress_content_streams()
        with path.open("wb") as handle:
            self.writer.write(handle)
        LOGGER.info("Wrote %d pages to %s", len(self.writer.pages), path)
        return path

    # ------------------------------------------------------------------
    # DocumentGraph protocol
    # ------------------------------------------------------------------
    @property
    def ref(self) -> PdfWriter:
        return self.writer

    def all_pages(self) -> List[PageObject]:
        return list(self.writer.pages)

    def add_page_at(self, page: PageObject, before: bool, anchor: PageObject) -> None:
        position = self._position(anchor)
        self.writer.insert_page(page, position if before else position + 1)

    def add_page_at_end(self, page: PageObject) -> None:
        self.writer.add_page(page)

    def remove_page(self, page: PageObject) -> None:
        del self.writer.pages[self._position(page)]

    def make_indirect_copy(self, page: PageObject) -> PageObject:
        # Shallow copy: the new page dictionary shares resources and content
        # streams with the original.
        copy = PageObject(self.writer)
        for key, value in page.items():
            if key != "/Parent":
                copy[NameObject(key)] = value
        self.writer._add_object(copy)  # type: ignore[attr-defined]
        return copy

    def owning_graph(self, page: PageObject) -> Optional[Any]:
        reference = page.indirect_reference
        return reference.pdf if reference is not None else None

    def is_page_object(self, obj: Any) -> bool:
        return isinstance(obj, PageObject) and obj.get("/Type") == "/Page"

    def same_page(self, first: Any, second: Any) -> bool:
        # PageObject is a dict and compares by value; identity is the
        # indirect reference.
        if first is second:
            return True
        left = getattr(first, "indirect_reference", None)
        right = getattr(second, "indirect_reference", None)
        if left is None or right is None:
            return False
        return left.pdf is right.pdf and left.idnum == right.idnum

    # ------------------------------------------------------------------
    def _position(self, page: PageObject) -> int:
        target = page.indirect_reference
        if target is not None and target.pdf is self.writer:
            for position, candidate in enumerate(self.writer.pages):
                reference = candidate.indirect_reference
                if reference is not None and reference.idnum == target.idnum:
                    return position
        raise PageNotFoundError("Page object is not part of this document.")


__all__ = ["PypdfGraph"]
