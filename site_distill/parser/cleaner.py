# site_distill/parser/cleaner.py
"""
Structural noise removal before Markdown conversion.

Cleaning runs in two passes: :func:`find_noise` marks every node of the
noise taxonomy, :func:`clean` then detaches the marked nodes. Anchors are
never marked, and link discovery reads the tree before cleaning anyway.
"""
from __future__ import annotations

from typing import FrozenSet, List, Set

from bs4 import BeautifulSoup
from bs4.element import Tag

NOISE_TAGS: FrozenSet[str] = frozenset(
    {"nav", "header", "footer", "aside", "script", "style"}
)
NOISE_ROLES: FrozenSet[str] = frozenset({"navigation", "banner", "contentinfo"})
NOISE_CLASSES: FrozenSet[str] = frozenset(
    {
        "navigation", "nav", "navbar", "menu",
        "header", "footer",
        "sidebar", "aside",
        "breadcrumbs",
        "social-links", "social-media",
    }
)
NOISE_IDS: FrozenSet[str] = frozenset(
    {"header", "footer", "nav", "navigation", "menu", "sidebar", "breadcrumbs"}
)
# stripped only in the strict profile
MEDIA_TAGS: FrozenSet[str] = frozenset(
    {
        "img", "svg", "canvas", "audio", "video", "picture", "iframe",
        "form", "input", "button", "select", "textarea",
        "link", "meta", "noscript",
    }
)


def _is_noise(tag: Tag, strip_media: bool) -> bool:
    name = tag.name
    if name == "a":
        return False
    if name in NOISE_TAGS or (strip_media and name in MEDIA_TAGS):
        return True
    if tag.get("role") in NOISE_ROLES:
        return True
    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    if any(cls in NOISE_CLASSES for cls in classes):
        return True
    return tag.get("id") in NOISE_IDS


def find_noise(soup: BeautifulSoup, strip_media: bool = True) -> List[Tag]:
    """Return the outermost noise nodes of *soup* in document order.

    Nodes nested inside an already marked node are not returned, since
    removing the ancestor removes them too.
    """
    marked: List[Tag] = []
    marked_ids: Set[int] = set()
    for tag in soup.find_all(True):
        # Tag.__eq__ compares markup, so track identity
        if marked_ids and any(id(parent) in marked_ids for parent in tag.parents):
            continue
        if _is_noise(tag, strip_media):
            marked.append(tag)
            marked_ids.add(id(tag))
    return marked


def clean(soup: BeautifulSoup, strip_media: bool = True) -> int:
    """Remove noise nodes from *soup* in place; return how many were removed.

    ``strip_media=False`` selects the looser profile that keeps images,
    embedded media, forms and ``<link>``/``<meta>`` elements.
    """
    marked = find_noise(soup, strip_media)
    for tag in marked:
        tag.decompose()
    return len(marked)
