# === FILE: site_distill/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Protocol

from aiohttp import ClientSession, ClientTimeout

from site_distill.config import CrawlConfig
from site_distill.crawler.fetcher import Fetcher
from site_distill.crawler.frontier import Frontier
from site_distill.crawler.link_extractor import extract_links
from site_distill.crawler.models import CrawlResult, FetchedPage, Page
from site_distill.crawler.scope import ScopeRule
from site_distill.errors import FetchFailure, ParseFailure
from site_distill.logger import LOGGER_NAME
from site_distill.parser.cleaner import clean
from site_distill.parser.html_parser import content_root, parse_html
from site_distill.parser.markdown import to_markdown

__all__ = ("AsyncCrawler", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> FetchedPage: ...


class AsyncCrawler:
    """Асинхронный BFS-краулер: пул воркеров над общим Frontier.

    Для каждого URL: claim → fetch → parse → поиск ссылок в исходном дереве →
    очистка → Markdown. Ошибки загрузки, разбора и конвертации не прерывают обход.
    """

    def __init__(
        self,
        config: CrawlConfig,
        *,
        fetcher: Optional[PageFetcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.scope = ScopeRule.from_seed(
            config.seed_url, path_scoped=config.path_scoped, ignore_www=config.ignore_www
        )
        self.fetcher: Optional[PageFetcher] = fetcher
        self.session: Optional[ClientSession] = None
        self.frontier: Optional[Frontier] = None
        self.result = CrawlResult()
        self._stop = asyncio.Event()

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def stop(self) -> None:
        """Stop dequeuing and cancel in-flight fetches; :meth:`crawl` returns what it has."""
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    async def crawl(self) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        self.logger.info("Starting crawl: %s", self.config.seed_url)
        start = time.monotonic()
        self.frontier = Frontier(self.config.seed_url)
        self.result = CrawlResult()

        workers = [asyncio.create_task(self._worker()) for _ in range(self.config.concurrency)]
        exhausted = asyncio.create_task(self.frontier.join())
        stopped = asyncio.create_task(self._stop.wait())
        try:
            await asyncio.wait({exhausted, stopped, *workers}, return_when=asyncio.FIRST_COMPLETED)
            self._raise_worker_error(workers)
        finally:
            for task in (*workers, exhausted, stopped):
                task.cancel()
            await asyncio.gather(*workers, exhausted, stopped, return_exceptions=True)

        if self.stopped and self.frontier.pending:
            self.logger.warning("Crawl stopped early, %d queued URLs left", self.frontier.pending)
        self.result.freeze()
        duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d pages in %.2f s, %d failed",
            len(self.result), duration, len(self.result.failures),
        )
        return self.result

    async def _worker(self) -> None:
        frontier = self.frontier
        assert frontier is not None
        while True:
            url = await frontier.next()
            try:
                if self._limit_reached():
                    continue
                seq = frontier.claim(url)
                if seq is None:
                    continue
                await self._process(url, seq)
            finally:
                frontier.task_done()

    async def _process(self, url: str, seq: int) -> None:
        assert self.fetcher is not None and self.frontier is not None
        self.logger.info("Crawling: %s", url)
        try:
            fetched = await self.fetcher.fetch(url)
            soup = parse_html(fetched.html)
            # links come from the unmodified tree, cleaning would drop nav anchors;
            # relative hrefs resolve against the URL the page was served from
            for link in extract_links(soup, fetched.url, self.scope):
                self.frontier.offer(link)
            removed = clean(soup, strip_media=self.config.strip_media)
            content = to_markdown(content_root(soup))
        except (FetchFailure, ParseFailure) as exc:
            self.logger.warning("Skipping %s: %s", url, exc.reason)
            self.result.record_failure(url, exc.reason)
            return

        self.logger.debug("Removed %d noise nodes from %s", removed, url)
        self.result.add(seq, Page(url, content))

    def _limit_reached(self) -> bool:
        limit = self.config.max_pages
        return limit is not None and self.frontier is not None and self.frontier.claimed >= limit

    @staticmethod
    def _raise_worker_error(workers: List[asyncio.Task]) -> None:
        for task in workers:
            if task.done() and not task.cancelled() and task.exception() is not None:
                raise task.exception()  # type: ignore[misc]

