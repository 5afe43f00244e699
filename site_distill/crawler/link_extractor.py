# site_distill/crawler/link_extractor.py
"""
Link discovery for SiteDistill.
"""
from __future__ import annotations

import logging
from typing import Iterator, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_distill.crawler.scope import ScopeRule
from site_distill.errors import InvalidURL
from site_distill.logger import LOGGER_NAME
from site_distill.utils import is_asset_url, normalize_url

_log = logging.getLogger(LOGGER_NAME)


def iter_links(soup: BeautifulSoup, page_url: str, scope: ScopeRule) -> Iterator[str]:
    """
    Yield normalized in-scope document links of *soup* in document order.

    Skips static assets, unparsable hrefs and anything outside *scope*.
    Duplicates are yielded as found.
    """
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw:
            continue
        try:
            url = normalize_url(raw, page_url)
        except InvalidURL as exc:
            _log.debug("Skipping link on %s: %s", page_url, exc)
            continue
        if is_asset_url(url):
            continue
        if scope.in_scope(url):
            yield url


def extract_links(soup: BeautifulSoup, page_url: str, scope: ScopeRule) -> List[str]:
    """List form of :func:`iter_links`."""
    return list(iter_links(soup, page_url, scope))
