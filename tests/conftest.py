# File: tests/conftest.py
import asyncio
import logging
from typing import Dict, List, Optional

import pytest

from site_distill.config import CrawlConfig
from site_distill.crawler.models import FetchedPage
from site_distill.errors import FetchFailure


class FakeFetcher:
    """In-memory fetcher: URL → HTML, unknown URLs fail with 404.

    *redirects* maps a requested URL to the URL whose page is served for it.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        delays: Optional[Dict[str, float]] = None,
        redirects: Optional[Dict[str, str]] = None,
    ) -> None:
        self.pages = pages
        self.delays = delays or {}
        self.redirects = redirects or {}
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchedPage:
        self.calls.append(url)
        await asyncio.sleep(self.delays.get(url, 0))
        final = self.redirects.get(url, url)
        if final not in self.pages:
            raise FetchFailure(url, "HTTP 404 Not Found", status=404)
        return FetchedPage(final, self.pages[final])


@pytest.fixture()
def make_fetcher():
    """
    Factory for FakeFetcher instances.
    """
    return FakeFetcher


@pytest.fixture()
def make_config():
    """
    Return a CrawlConfig builder with test-friendly defaults.
    """

    def _build(seed_url: str = "https://example.com/", **kwargs) -> CrawlConfig:
        kwargs.setdefault("concurrency", 1)
        kwargs.setdefault("timeout", 2.0)
        kwargs.setdefault("user_agent", "TestAgent/1.0")
        return CrawlConfig(seed_url=seed_url, **kwargs)

    return _build


@pytest.fixture()
def test_logger(caplog) -> logging.Logger:
    """
    Propagating logger handed to the crawler so caplog sees its records.
    """
    caplog.set_level(logging.DEBUG, logger="tests.crawl")
    return logging.getLogger("tests.crawl")
