# site_distill/parser/markdown.py
"""
HTML → Markdown conversion via markdownify.
"""
from __future__ import annotations

import re
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from markdownify import ATX, markdownify

from site_distill.errors import ParseFailure

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def to_markdown(node: Union[BeautifulSoup, Tag, str]) -> str:
    """Render *node* (a tree or markup string) as Markdown.

    Headings use ATX style (``#``), bullets ``-``. Runs of blank lines are
    collapsed and surrounding whitespace stripped.

    markdownify walks the tree recursively; a document nested deeper than the
    interpreter's recursion limit raises :class:`ParseFailure`.
    """
    markup = node if isinstance(node, str) else str(node)
    try:
        text = markdownify(markup, heading_style=ATX, bullets="-")
    except RecursionError as exc:
        raise ParseFailure("document too deeply nested to convert") from exc
    return _BLANK_RUN_RE.sub("\n\n", text).strip()
