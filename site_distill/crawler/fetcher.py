# site_distill/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per page, no retries.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from site_distill.crawler.models import FetchedPage
from site_distill.errors import FetchFailure


class Fetcher:
    """Fetch page bodies through a shared aiohttp session.

    Any non-2xx status, client error or timeout becomes :class:`FetchFailure`;
    the caller decides what to do with it.
    """

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchedPage:
        """Return the decoded body of *url* and the URL it was served from after redirects."""
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    reason = f"HTTP {resp.status} {resp.reason or ''}".rstrip()
                    raise FetchFailure(url, reason, status=resp.status)
                html = await resp.text(errors="replace")
                return FetchedPage(str(resp.url), html)
        except asyncio.TimeoutError as exc:
            raise FetchFailure(url, "timed out") from exc
        except ClientError as exc:
            raise FetchFailure(url, f"{type(exc).__name__}: {exc}") from exc
