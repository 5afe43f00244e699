# site_distill/errors.py
"""
Exception taxonomy for SiteDistill.

Only an invalid seed URL is fatal; everything else is logged and the page
is dropped.
"""
from __future__ import annotations

from typing import Optional


class SiteDistillError(Exception):
    """Base class for all SiteDistill errors."""


class InvalidURL(SiteDistillError, ValueError):
    """The string cannot be parsed as an absolute (or resolvable) URL."""

    def __init__(self, url: str, reason: str = "malformed URL") -> None:
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason


class FetchFailure(SiteDistillError):
    """Non-2xx response or network error while fetching a page."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
        self.status = status


class ParseFailure(SiteDistillError):
    """The HTML parser rejected the markup."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


__all__ = ["SiteDistillError", "InvalidURL", "FetchFailure", "ParseFailure"]
