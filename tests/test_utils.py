from __future__ import annotations

import logging

import pytest

from pdf_pagelist.exceptions import PageIndexError, PageListError
from pdf_pagelist.utils import compression_enabled, configure_logging, parse_page_spec


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("1", [1]),
        ("3,1", [3, 1]),
        ("1-3", [1, 2, 3]),
        (" 2 , 4-5 ,2", [2, 4, 5, 2]),
        ("3,1-2,1", [3, 1, 2, 1]),
        ("2-2", [2]),
    ],
)
def test_parse_page_spec(spec: str, expected: list[int]) -> None:
    assert parse_page_spec(spec) == expected


@pytest.mark.parametrize("spec", ["", "   ", "a", "3-1", "1-", "1.5", "1,,2", "-2"])
def test_parse_page_spec_invalid(spec: str) -> None:
    with pytest.raises(PageListError):
        parse_page_spec(spec)


@pytest.mark.parametrize("spec", ["0", "0-2"])
def test_parse_page_spec_zero(spec: str) -> None:
    with pytest.raises(PageIndexError):
        parse_page_spec(spec)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("1", True), ("ON", True), ("no", False), ("", False)],
)
def test_compression_enabled(monkeypatch: pytest.MonkeyPatch, value: str | None, expected: bool) -> None:
    if value is None:
        monkeypatch.delenv("PDF_PAGELIST_COMPRESS", raising=False)
    else:
        monkeypatch.setenv("PDF_PAGELIST_COMPRESS", value)
    assert compression_enabled() is expected


def test_configure_logging_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs["level"]))

    monkeypatch.delenv("PDF_PAGELIST_LOG_LEVEL", raising=False)
    configure_logging()
    monkeypatch.setenv("PDF_PAGELIST_LOG_LEVEL", "info")
    configure_logging()
    configure_logging("DEBUG")
    monkeypatch.setenv("PDF_PAGELIST_LOG_LEVEL", "chatty")
    configure_logging()

    assert calls == [logging.WARNING, logging.INFO, logging.DEBUG, logging.WARNING]
