# File: tests/test_cleaner.py
"""Content cleaner: noise taxonomy, both profiles, idempotence."""
import pytest

from site_distill.parser.cleaner import clean, find_noise
from site_distill.parser.html_parser import parse_html

PAGE = """
<html>
<head>
  <title>Docs</title>
  <meta charset="utf-8">
  <link rel="stylesheet" href="/s.css">
  <style>p { color: red }</style>
</head>
<body>
  <header><h1>Site name</h1></header>
  <nav><a href="/a">Nav link</a></nav>
  <div role="banner">Banner text</div>
  <div role="navigation">Role nav</div>
  <div class="menu">Menu text</div>
  <div class="Menu">Capitalised class is kept</div>
  <div id="footer">Footer by id</div>
  <main>
    <h2>Article</h2>
    <p>Body text <a class="nav" href="/x">inline link</a></p>
    <img src="/logo.png" alt="Logo">
    <video src="/clip.mp4"></video>
    <form action="/search"><input name="q"><button>Go</button></form>
    <ul class="breadcrumbs"><li>Home</li></ul>
  </main>
  <aside>Side</aside>
  <script>var tracking = 1;</script>
  <footer>Foot</footer>
</body>
</html>
"""

ALWAYS_GONE = ["header", "nav", "aside", "footer", "script", "style"]
MEDIA = ["img", "video", "form", "input", "button", "meta", "link"]


def test_strict_profile_removes_noise_and_media():
    soup = parse_html(PAGE)
    removed = clean(soup, strip_media=True)

    assert removed > 0
    for name in ALWAYS_GONE + MEDIA:
        assert soup.find(name) is None, name
    text = soup.get_text(" ", strip=True)
    for gone in ("Banner text", "Role nav", "Menu text", "Footer by id", "Home"):
        assert gone not in text
    assert "Body text" in text
    assert "Capitalised class is kept" in text


def test_loose_profile_keeps_media():
    soup = parse_html(PAGE)
    clean(soup, strip_media=False)

    for name in ALWAYS_GONE:
        assert soup.find(name) is None, name
    assert soup.find("img") is not None
    assert soup.find("form") is not None
    assert soup.find("meta") is not None


def test_anchors_are_never_noise():
    soup = parse_html(PAGE)
    clean(soup)
    link = soup.find("a", href="/x")
    assert link is not None
    assert link.get_text() == "inline link"


@pytest.mark.parametrize("strip_media", [True, False])
def test_cleaning_is_idempotent(strip_media):
    soup = parse_html(PAGE)
    clean(soup, strip_media=strip_media)
    once = str(soup)
    assert clean(soup, strip_media=strip_media) == 0
    assert str(soup) == once


def test_find_noise_marks_outermost_only():
    soup = parse_html(PAGE)
    names = [tag.name for tag in find_noise(soup)]
    assert "form" in names
    assert "input" not in names
    assert "button" not in names
    # marking alone does not touch the tree
    assert soup.find("nav") is not None


def test_identical_noise_blocks_are_all_removed():
    soup = parse_html('<div class="menu">x</div><p>keep</p><div class="menu">x</div>')
    assert clean(soup) == 2
    assert soup.get_text(strip=True) == "keep"
