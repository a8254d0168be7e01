"""Relative path arithmetic for pages at any folder depth.

Every reference a page emits (stylesheet, breadcrumb targets) climbs back to
the site root with a run of ``../`` segments. The helpers here compute that
run from a document's root-relative path.

Examples
--------
>>> split_segments("sub/page.md")
['', 'sub', 'page.md']
>>> document_depth("sub/page.md")
1
>>> relative_reference(1, "style.css")
'../style.css'
>>> relative_reference(0, "index.html")
'index.html'
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ssg_pages._constants import PARENT_SEGMENT


def split_segments(relative_path: PurePosixPath | str) -> list[str]:
    """Return the path segments, led by an empty segment denoting the root."""
    text = str(relative_path).replace("\\", "/").lstrip("/")
    if text in ("", "."):
        return [""]
    return ["", *text.split("/")]


def document_depth(relative_path: PurePosixPath | str) -> int:
    """Return how many folders separate the document from the site root."""
    return max(len(split_segments(relative_path)) - 2, 0)


def ascent_prefix(count: int) -> str:
    """Return ``count`` parent-directory segments; non-positive counts give ``""``."""
    return PARENT_SEGMENT * max(count, 0)


def relative_reference(count: int, target: str) -> str:
    """Return ``target`` prefixed with ``count`` parent-directory segments."""
    return f"{ascent_prefix(count)}{target}"


__all__ = ["ascent_prefix", "document_depth", "relative_reference", "split_segments"]
