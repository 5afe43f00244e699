# site_distill/crawler/models.py
"""
Data models for the SiteDistill crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class FetchedPage:
    """Body of a fetched page and the URL it was finally served from."""

    url: str
    html: str


@dataclass(frozen=True, slots=True)
class Page:
    """Normalized URL and Markdown content of a processed page."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class FailedPage:
    """A page dropped from the crawl and why."""

    url: str
    reason: str


@dataclass(slots=True)
class CrawlResult:
    """Pages accumulated over one crawl.

    Pages are appended with the sequence number handed out when their URL was
    claimed from the frontier. :meth:`freeze` orders them by that number, so
    the final order is dequeue order no matter which worker finished first.
    """

    _entries: List[Tuple[int, Page]] = field(default_factory=list)
    failures: List[FailedPage] = field(default_factory=list)
    frozen: bool = False

    def add(self, seq: int, page: Page) -> None:
        self._check_mutable()
        self._entries.append((seq, page))

    def record_failure(self, url: str, reason: str) -> None:
        self._check_mutable()
        self.failures.append(FailedPage(url, reason))

    def freeze(self) -> CrawlResult:
        if not self.frozen:
            self._entries.sort(key=lambda entry: entry[0])
            self.frozen = True
        return self

    @property
    def pages(self) -> Tuple[Page, ...]:
        return tuple(page for _, page in sorted(self._entries, key=lambda entry: entry[0]))

    @property
    def urls(self) -> List[str]:
        return [page.url for page in self.pages]

    def __len__(self) -> int:
        return len(self._entries)

    def _check_mutable(self) -> None:
        if self.frozen:
            raise RuntimeError("CrawlResult is frozen")
