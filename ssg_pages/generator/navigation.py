"""Derive sidebar and breadcrumb navigation from the source folder layout.

Both structures are rebuilt for every document from the file system alone:
the sidebar lists the Markdown files that share the document's folder, and the
breadcrumb walks the document's path from the site root down to the page.

Examples
--------
>>> from pathlib import PurePosixPath
>>> trail = build_breadcrumb(PurePosixPath("guides/setup.md"), "index.html")
>>> [(entry.display_text, entry.href) for entry in trail]
[('Home', '../index.html'), ('guides', 'index.html'), ('setup', None)]
"""

from __future__ import annotations

import typing as typ
from pathlib import PurePosixPath

from ssg_pages._constants import HOME_LABEL, OUTPUT_SUFFIX, SOURCE_SUFFIX

from .models import BreadcrumbEntry, SidebarEntry
from .paths import relative_reference, split_segments

if typ.TYPE_CHECKING:
    from pathlib import Path


def build_sidebar(
    directory: Path,
    *,
    source_suffix: str = SOURCE_SUFFIX,
    output_suffix: str = OUTPUT_SUFFIX,
) -> list[SidebarEntry]:
    """List the source documents in ``directory`` as same-folder page links.

    Parameters
    ----------
    directory : Path
        Source folder containing the current document.
    source_suffix : str, optional
        Suffix identifying source documents. Defaults to ``".md"``.
    output_suffix : str, optional
        Suffix of the generated pages. Defaults to ``".html"``.

    Returns
    -------
    list[SidebarEntry]
        One entry per regular file with ``source_suffix``, sorted by file name
        so every page of a folder shows the same order. Subdirectories are
        never listed.
    """
    siblings = sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix == source_suffix
        ),
        key=lambda path: path.name,
    )
    return [
        SidebarEntry(display_text=path.stem, href=f"./{path.stem}{output_suffix}")
        for path in siblings
    ]


def build_breadcrumb(
    relative_path: PurePosixPath | str, default_document: str
) -> list[BreadcrumbEntry]:
    """Build the root-to-page trail for ``relative_path``.

    Parameters
    ----------
    relative_path : PurePosixPath | str
        Document path relative to the site root, e.g. ``sub/page.md``. A path
        without a file suffix in its last segment is treated as a folder, and
        every entry then carries a link.
    default_document : str
        File name each folder entry links to, e.g. ``index.html``.

    Returns
    -------
    list[BreadcrumbEntry]
        One entry per path segment, the root ``Home`` entry first. The root
        climbs ``len(segments) - 2`` folders and the folder at index ``i``
        climbs ``len(segments) - i - 2``; the page itself has no link.
    """
    segments = split_segments(relative_path)
    total = len(segments)
    last_index = total - 1
    trail: list[BreadcrumbEntry] = []
    for index, segment in enumerate(segments):
        if index == 0 and segment == "":
            trail.append(
                BreadcrumbEntry(HOME_LABEL, relative_reference(total - 2, default_document))
            )
        elif index == last_index and PurePosixPath(segment).suffix:
            trail.append(BreadcrumbEntry(PurePosixPath(segment).stem))
        else:
            trail.append(
                BreadcrumbEntry(
                    segment, relative_reference(total - index - 2, default_document)
                )
            )
    return trail


__all__ = ["build_breadcrumb", "build_sidebar"]
