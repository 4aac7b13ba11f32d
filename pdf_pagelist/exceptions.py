"""
Custom exceptions for PDF PageList.

Every error a page list can raise derives from :class:`PageListError`. The
errors callers are most likely to catch also derive from the builtin that a
plain Python list would raise in the same situation, so ``except IndexError``
keeps working.
"""


class PageListError(Exception):
    """Base exception for all PDF PageList errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown page list error occurred."


class PageIndexError(PageListError, IndexError):
    """Raised when a page index or ordinal is outside the document."""

    @property
    def default_message(self) -> str:
        return "Accessing nonexistent PDF page number."


class PageTypeError(PageListError, TypeError):
    """Raised when something other than a page is added to a page list."""

    @property
    def default_message(self) -> str:
        return "Only pages can be inserted into a page list."


class SliceLengthError(PageListError, ValueError):
    """Raised when an extended slice is assigned the wrong number of pages."""

    def __init__(self, source_length: int, slice_length: int) -> None:
        self.source_length = source_length
        self.slice_length = slice_length
        super().__init__(
            f"attempt to assign sequence of length {source_length} "
            f"to extended slice of size {slice_length}"
        )


class ConcurrentModificationError(PageListError, RuntimeError):
    """Raised when a source page list changes while it is being copied."""

    @property
    def default_message(self) -> str:
        return "Source page list modified during iteration."


class GraphError(PageListError):
    """Raised by a document graph when a primitive operation is rejected."""

    @property
    def default_message(self) -> str:
        return "Document graph operation failed."


class DuplicatePageError(GraphError):
    """Raised when the same indirect page would appear twice in one document."""

    @property
    def default_message(self) -> str:
        return "Page object is already present in this document."


class PageNotFoundError(GraphError):
    """Raised when removing or anchoring on a page the document does not hold."""

    @property
    def default_message(self) -> str:
        return "Page object is not part of this document."


class DanglingReferenceError(GraphError):
    """Raised when a page refers back to a document that no longer exists."""

    @property
    def default_message(self) -> str:
        return "Page belongs to a document that has been closed."


class InvalidPDFError(PageListError):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PageListError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."
