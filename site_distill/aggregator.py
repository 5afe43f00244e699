# File: site_distill/aggregator.py
"""site_distill.aggregator: Сборка итогового Markdown-документа из страниц обхода."""

from __future__ import annotations

from typing import Iterable, List

from site_distill.config import DEFAULT_TITLE
from site_distill.crawler.models import Page

SEPARATOR = "---"


def render_section(page: Page) -> str:
    """Секция одной страницы: заголовок с URL, содержимое, разделитель."""
    return f"## {page.url}\n\n{page.content}\n\n{SEPARATOR}\n\n"


def render(pages: Iterable[Page], title: str = DEFAULT_TITLE) -> str:
    """Склеивает страницы в один документ в порядке обхода, без фильтрации."""
    parts: List[str] = [f"# {title}\n\n"]
    parts.extend(render_section(page) for page in pages)
    return "".join(parts)


__all__ = ["SEPARATOR", "render", "render_section"]
