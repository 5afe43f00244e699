# === FILE: site_distill/parser/html_parser.py ===
"""HTML parsing for SiteDistill.

A thin wrapper around :class:`bs4.BeautifulSoup` with the stdlib
``html.parser`` backend. The returned soup is the mutable document tree the
rest of the pipeline works on: the link extractor reads it first, the
cleaner then removes noise from it in place, and the converter renders
what is left.
"""
from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from site_distill.errors import ParseFailure

__all__: Sequence[str] = ("parse_html", "content_root")


def parse_html(html: str) -> BeautifulSoup:
    """Parse *html* into a document tree.

    Raises
    ------
    ParseFailure
        If BeautifulSoup rejects the markup. ``html.parser`` is tolerant, so
        this is rare.
    """
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseFailure(str(exc)) from exc


def content_root(soup: BeautifulSoup):
    """Return ``<body>`` when present, otherwise the whole document."""
    return soup.body if soup.body is not None else soup
