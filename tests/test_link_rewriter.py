"""Unit tests for retargeting Markdown links in sanitized HTML.

The rewriter must only touch local anchors whose ``href`` ends in ``.md``;
every other byte of the fragment, including text that merely mentions a
``.md`` file, stays exactly as it was.

Usage
-----
Run ``pytest tests/test_link_rewriter.py -v``.
"""

from __future__ import annotations

import pytest

from ssg_pages.generator.link_rewriter import (
    change_suffix,
    rewrite_document_links,
    should_rewrite,
)


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("other.md", True),
        ("../up/other.md", True),
        ("", False),
        (None, False),
        ("http://example.com/a.md", False),
        ("https://example.com/a.md", False),
        ("page.md#install", False),
        ("image.png", False),
    ],
)
def test_should_rewrite_predicates(href: str | None, expected: bool) -> None:
    """Only non-empty, non-http(s) hrefs ending in ``.md`` qualify."""
    assert should_rewrite(href) is expected, f"unexpected decision for {href!r}"


def test_change_suffix_keeps_directories() -> None:
    """Only the trailing suffix changes."""
    actual = change_suffix("docs/setup.md", ".md", ".html")
    assert actual == "docs/setup.html", f"unexpected rewrite {actual!r}"


def test_html_without_anchors_is_returned_unchanged() -> None:
    """A fragment with no anchors is a no-op rather than an error."""
    html = "<p>plain &amp; simple, see notes.md</p>"
    assert rewrite_document_links(html) == html, "expected fragment to be untouched"


def test_html_without_matching_anchors_is_returned_unchanged() -> None:
    """External, empty, and non-Markdown anchors leave the fragment identical."""
    html = (
        '<p><a href="https://example.com/a.md">ext</a> '
        '<a href="http://example.com/b.md">plain</a> '
        '<a href="">empty</a> <a href="photo.png">photo</a></p>'
    )
    assert rewrite_document_links(html) == html, "expected no anchor to change"


def test_only_matching_anchor_changes() -> None:
    """Matching anchors are retargeted while neighbours stay byte-identical."""
    html = (
        '<p>See other.md or <a href="other.md">Other</a> and '
        '<a href="https://example.com/a.md">ext</a>.</p>'
    )
    expected = (
        '<p>See other.md or <a href="other.html">Other</a> and '
        '<a href="https://example.com/a.md">ext</a>.</p>'
    )
    actual = rewrite_document_links(html)
    assert actual == expected, f"unexpected rewrite result {actual!r}"


def test_identical_anchors_are_each_rewritten() -> None:
    """Byte-identical anchors are rewritten once each, in document order."""
    html = '<ul><li><a href="a.md">A</a></li><li><a href="a.md">A</a></li></ul>'
    expected = '<ul><li><a href="a.html">A</a></li><li><a href="a.html">A</a></li></ul>'
    actual = rewrite_document_links(html)
    assert actual == expected, f"unexpected rewrite result {actual!r}"


def test_anchor_text_mentioning_markdown_file_is_kept() -> None:
    """Only the attribute changes; link text naming the file is preserved."""
    html = '<p><a href="guide/setup.md" rel="noopener noreferrer">setup.md</a></p>'
    expected = '<p><a href="guide/setup.html" rel="noopener noreferrer">setup.md</a></p>'
    actual = rewrite_document_links(html)
    assert actual == expected, f"unexpected rewrite result {actual!r}"


def test_unlocatable_anchor_falls_back_to_tree_serialization() -> None:
    """Anchors the parser re-quotes are still rewritten via the parsed tree."""
    html = "<p><a href='single.md'>single</a></p>"
    actual = rewrite_document_links(html)
    assert actual == '<p><a href="single.html">single</a></p>', (
        f"expected fallback serialization with rewritten href, got {actual!r}"
    )


def test_custom_suffixes() -> None:
    """Source and output suffixes are configurable."""
    html = '<a href="notes.markdown">n</a>'
    actual = rewrite_document_links(html, source_suffix=".markdown", output_suffix=".htm")
    assert actual == '<a href="notes.htm">n</a>', f"unexpected rewrite {actual!r}"
