# File: site_distill/engine.py
"""site_distill.engine: запуск краулера с ограничением по времени."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from site_distill.config import CrawlConfig
from site_distill.crawler.crawler import AsyncCrawler, PageFetcher
from site_distill.crawler.models import CrawlResult
from site_distill.logger import logger as default_logger

__all__ = ["start_crawl"]


async def start_crawl(
    config: CrawlConfig,
    *,
    crawl_timeout: Optional[float] = None,
    fetcher: Optional[PageFetcher] = None,
    logger: Optional[logging.Logger] = None,
) -> CrawlResult:
    """
    Запускает AsyncCrawler в контексте и возвращает замороженный CrawlResult.

    Parameters
    ----------
    config : CrawlConfig
        Конфигурация обхода.
    crawl_timeout : float, optional
        Общий лимит времени. По истечении обход останавливается через
        ``AsyncCrawler.stop()`` и возвращаются уже собранные страницы.
    fetcher, logger
        Подмена загрузчика и логгера (для тестов и встраивания).
    """
    log = logger or default_logger
    async with AsyncCrawler(config, fetcher=fetcher, logger=log) as crawler:
        handle = None
        if crawl_timeout is not None:
            handle = asyncio.get_running_loop().call_later(crawl_timeout, crawler.stop)
        try:
            result = await crawler.crawl()
        finally:
            if handle is not None:
                handle.cancel()
        if crawler.stopped:
            log.warning("Crawl deadline of %s s reached, result is partial", crawl_timeout)
    return result
