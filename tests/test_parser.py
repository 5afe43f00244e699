# File: tests/test_parser.py
import pytest

from site_distill.errors import ParseFailure
from site_distill.parser.html_parser import content_root, parse_html
from site_distill.parser.markdown import to_markdown


def test_content_root_prefers_body():
    soup = parse_html("<html><head><title>T</title></head><body><p>x</p></body></html>")
    assert content_root(soup).name == "body"
    fragment = parse_html("<p>no body</p>")
    assert content_root(fragment) is fragment


def test_tolerant_parser_accepts_broken_markup():
    soup = parse_html("<div><p>unclosed <b>bold</div>")
    assert "bold" in soup.get_text()


def test_markdown_structure():
    md = to_markdown(
        "<h2>Title</h2><p>Hello <strong>world</strong></p>"
        "<ul><li>one</li><li>two</li></ul>"
        '<p><a href="https://a.com/x">link</a></p>'
    )
    assert "## Title" in md
    assert "**world**" in md
    assert "- one" in md
    assert "[link](https://a.com/x)" in md
    assert "\n\n\n" not in md
    assert md == md.strip()


def test_markdown_accepts_tree():
    soup = parse_html("<body><h1>Head</h1><p>Para</p></body>")
    md = to_markdown(content_root(soup))
    assert md.startswith("# Head")
    assert "Para" in md


def test_markdown_rejects_runaway_nesting():
    with pytest.raises(ParseFailure):
        to_markdown("<div>" * 5000 + "x" + "</div>" * 5000)
