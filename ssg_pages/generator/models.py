"""Shared dataclasses used by the site generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path, PurePosixPath


@dc.dataclass(frozen=True, slots=True)
class Document:
    """A source Markdown document and where its page is written.

    Attributes
    ----------
    relative_path : PurePosixPath
        Location relative to the input root, e.g. ``sub/page.md``.
    source_path : Path
        Absolute path of the Markdown source.
    output_path : Path
        Absolute path of the HTML page; same relative path, output suffix.
    content : str
        Raw Markdown text.
    """

    relative_path: PurePosixPath
    source_path: Path
    output_path: Path
    content: str

    @classmethod
    def load(
        cls,
        relative_path: PurePosixPath,
        *,
        input_root: Path,
        output_root: Path,
        output_suffix: str,
    ) -> Document:
        """Read the source text for ``relative_path`` and resolve both locations."""
        source_path = input_root.joinpath(*relative_path.parts)
        output_relative = relative_path.with_suffix(output_suffix)
        output_path = output_root.joinpath(*output_relative.parts)
        content = source_path.read_text(encoding="utf-8")
        return cls(
            relative_path=relative_path,
            source_path=source_path,
            output_path=output_path,
            content=content,
        )


@dc.dataclass(frozen=True, slots=True)
class SidebarEntry:
    """Link to a sibling document in the same source folder."""

    display_text: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class BreadcrumbEntry:
    """One step of the trail from the site root to the current page.

    ``href`` is ``None`` for the current page, which renders as plain text.
    """

    display_text: str
    href: str | None = None


__all__ = ["BreadcrumbEntry", "Document", "SidebarEntry"]
