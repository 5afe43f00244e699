# File: site_distill/utils.py
"""site_distill.utils: Нормализация URL и фильтр статических ресурсов."""

from __future__ import annotations

import re
from typing import Optional, Sequence
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

from site_distill.errors import InvalidURL
from site_distill.logger import logger

__all__: Sequence[str] = (
    "ASSET_EXTENSIONS",
    "normalize_url",
    "is_asset_url",
    "strip_www",
    "ensure_trailing_slash",
)

ASSET_EXTENSIONS: Sequence[str] = (
    "jpg", "jpeg", "png", "gif", "svg", "ico", "webp", "bmp",
    "css", "js", "woff", "woff2",
)
_ASSET_RE = re.compile(r"\.(?:%s)$" % "|".join(ASSET_EXTENSIONS), re.IGNORECASE)
_HTTP_SCHEMES = ("http", "https")


def normalize_url(raw: str, base: Optional[str] = None) -> str:
    """Приводит URL к ключу для дедупликации.

    Относительная ссылка разрешается относительно ``base``, фрагмент
    отбрасывается. Пустой путь у http(s) заменяется на ``/``. Больше ничего
    не меняется: регистр, завершающий слеш и порядок параметров сохраняются.
    """
    candidate = raw.strip()
    try:
        absolute = urljoin(base, candidate) if base else candidate
        absolute, _fragment = urldefrag(absolute)
        parts = urlsplit(absolute)
        _ = parts.port  # ValueError on a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidURL(raw, str(exc)) from exc

    if not parts.scheme:
        raise InvalidURL(raw, "missing scheme")
    if parts.scheme.lower() in _HTTP_SCHEMES:
        if not parts.hostname:
            raise InvalidURL(raw, "missing host")
        if not parts.path:
            parts = parts._replace(path="/")

    normalized = urlunsplit(parts)
    logger.debug("Normalized URL: %s -> %s", raw, normalized)
    return normalized


def is_asset_url(url: str) -> bool:
    """Истина, если путь оканчивается расширением статического ресурса."""
    try:
        path = urlsplit(url).path
    except ValueError:
        return False
    return bool(_ASSET_RE.search(path))


def strip_www(host: str) -> str:
    """Убирает ведущую метку ``www.``."""
    return host[4:] if host.startswith("www.") else host


def ensure_trailing_slash(path: str) -> str:
    return path if path.endswith("/") else path + "/"
