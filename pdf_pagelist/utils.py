"""Utility helpers for PDF PageList."""

from __future__ import annotations

import logging
import os
import re
from itertools import chain
from typing import Iterator, List, Optional

from .exceptions import PageIndexError, PageListError

LOG_LEVEL_ENV = "PDF_PAGELIST_LOG_LEVEL"
COMPRESS_ENV = "PDF_PAGELIST_COMPRESS"
_TRUTHY = {"1", "true", "yes", "on"}
_TOKEN = re.compile(r"^(?P<start>\d+)(?:-(?P<end>\d+))?$")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure package-wide logging.

    ``level`` wins over ``PDF_PAGELIST_LOG_LEVEL``; unknown names fall back
    to ``WARNING``.
    """

    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def compression_enabled() -> bool:
    value = os.getenv(COMPRESS_ENV)
    return value is not None and value.strip().lower() in _TRUTHY


def _page_numbers(token: str) -> Iterator[int]:
    """Yield the page numbers named by one ``N`` or ``N-M`` token, in order."""

    match = _TOKEN.match(token)
    if not match:
        raise PageListError(
            f"Invalid page token: '{token}'. Expected a page number or 'start-end'."
        )

    start = int(match.group("start"))
    end = int(match.group("end") or start)
    if start < 1:
        raise PageIndexError(f"Invalid page token '{token}': page numbers must be >= 1.")
    if start > end:
        raise PageListError(
            f"Invalid range '{token}': start page ({start}) must be <= end page ({end})."
        )
    yield from range(start, end + 1)


def parse_page_spec(page_spec: str) -> List[int]:
    """Parse ``"1,3,5-7"`` into 1-based page numbers.

    Tokens are expanded left to right and nothing is deduplicated, so
    ``"3,1-2,1"`` gives ``[3, 1, 2, 1]``.
    """

    if not page_spec or not page_spec.strip():
        raise PageListError("Page specification cannot be empty")

    return list(chain.from_iterable(_page_numbers(token.strip()) for token in page_spec.split(",")))


__all__ = ["configure_logging", "compression_enabled", "parse_page_spec"]
