"""Helpers for retargeting same-site Markdown links to generated HTML pages.

Rendered Markdown keeps links such as ``[setup](guide/setup.md)`` pointing at
the source file. Once the page is sanitized, :func:`rewrite_document_links`
swaps the ``.md`` suffix for ``.html`` on every local anchor so the site stays
navigable. Each rewritten anchor is replaced at its own serialized position in
the HTML text, leaving every other byte of the document as it was.

Examples
--------
>>> rewrite_document_links('<p><a href="guide/setup.md">setup</a></p>')
'<p><a href="guide/setup.html">setup</a></p>'
>>> rewrite_document_links('<a href="https://example.com/a.md">x</a>')
'<a href="https://example.com/a.md">x</a>'
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from ssg_pages._constants import OUTPUT_SUFFIX, SOURCE_SUFFIX

if typ.TYPE_CHECKING:
    from bs4.element import Tag

EXTERNAL_PREFIXES = ("http://", "https://")


def should_rewrite(href: str | None, source_suffix: str = SOURCE_SUFFIX) -> bool:
    """Return True when ``href`` is a non-empty local link to a source document."""
    if not href:
        return False
    if href.startswith(EXTERNAL_PREFIXES):
        return False
    return href.endswith(source_suffix)


def change_suffix(href: str, source_suffix: str, output_suffix: str) -> str:
    """Replace the trailing ``source_suffix`` of ``href`` with ``output_suffix``."""
    return f"{href[: -len(source_suffix)]}{output_suffix}"


def rewrite_document_links(
    html: str,
    *,
    source_suffix: str = SOURCE_SUFFIX,
    output_suffix: str = OUTPUT_SUFFIX,
) -> str:
    """Rewrite local ``source_suffix`` anchors in ``html`` to ``output_suffix``.

    Parameters
    ----------
    html : str
        Sanitized HTML fragment.
    source_suffix : str, optional
        Suffix identifying links to source documents. Defaults to ``".md"``.
    output_suffix : str, optional
        Suffix of generated pages. Defaults to ``".html"``.

    Returns
    -------
    str
        The HTML with matching anchors retargeted. Returned unchanged when no
        anchor qualifies.

    Notes
    -----
    Anchors are located by their serialized form, searching forward from the
    previous replacement, so identical anchors are each rewritten once and in
    document order. When the parser's serialization of an anchor differs from
    the source text, the whole fragment is re-serialized from the parsed tree
    instead.
    """
    soup = BeautifulSoup(html, "html.parser")
    anchors: list[Tag] = [
        anchor
        for anchor in soup.find_all("a", href=True)
        if should_rewrite(anchor.get("href"), source_suffix)
    ]
    if not anchors:
        return html

    pieces: list[str] = []
    cursor = 0
    for anchor in anchors:
        original = str(anchor)
        href = typ.cast("str", anchor["href"])
        anchor["href"] = change_suffix(href, source_suffix, output_suffix)
        position = html.find(original, cursor)
        if position < 0:
            return _reserialize(soup, anchors, source_suffix, output_suffix)
        pieces.append(html[cursor:position])
        pieces.append(str(anchor))
        cursor = position + len(original)
    pieces.append(html[cursor:])
    return "".join(pieces)


def _reserialize(
    soup: BeautifulSoup,
    anchors: list[Tag],
    source_suffix: str,
    output_suffix: str,
) -> str:
    """Finish rewriting every anchor in the tree and return the whole fragment."""
    for anchor in anchors:
        href = typ.cast("str", anchor["href"])
        if href.endswith(source_suffix):
            anchor["href"] = change_suffix(href, source_suffix, output_suffix)
    return str(soup)


__all__ = ["change_suffix", "rewrite_document_links", "should_rewrite"]
