# site_distill/crawler/scope.py
"""
Scope policy deciding which discovered URLs may be crawled.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from site_distill.utils import ensure_trailing_slash, strip_www


@dataclass(frozen=True, slots=True)
class ScopeRule:
    """Host (and optionally path prefix) restriction derived from the seed URL.

    With ``ignore_www`` the hosts are compared after stripping a leading
    ``www.`` from both sides, so ``www.example.com`` and ``example.com`` are
    one site. ``base_path`` is set only in path-scoped mode and always ends
    with a slash.
    """

    host: str
    base_path: Optional[str] = None
    ignore_www: bool = False

    @classmethod
    def from_seed(
        cls,
        seed: str,
        path_scoped: bool = False,
        ignore_www: Optional[bool] = None,
    ) -> ScopeRule:
        parts = urlsplit(seed)
        base_path = ensure_trailing_slash(parts.path or "/") if path_scoped else None
        if ignore_www is None:
            ignore_www = path_scoped
        return cls(host=parts.hostname or "", base_path=base_path, ignore_www=ignore_www)

    def in_scope(self, candidate: str) -> bool:
        """Return True if *candidate* (a normalized URL) belongs to the crawl."""
        try:
            parts = urlsplit(candidate)
            host = parts.hostname or ""
        except ValueError:
            return False
        if parts.scheme.lower() not in ("http", "https"):
            return False
        if not self._same_host(host):
            return False
        if self.base_path is None:
            return True
        return ensure_trailing_slash(parts.path or "/").startswith(self.base_path)

    def _same_host(self, host: str) -> bool:
        if self.ignore_www:
            return strip_www(host) == strip_www(self.host)
        return host == self.host
