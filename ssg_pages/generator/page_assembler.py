"""Merge rendered content and navigation into the shared page template.

The page template is an ordinary HTML file that marks four elements by id:
the content container, the sidebar list, the breadcrumb list, and the
stylesheet ``<link>``. :class:`PageTemplate` checks those ids once when the
template is loaded and hands every document a freshly parsed copy, so lists
injected into one page never leak into the next. :class:`PageAssembler` fills
the copy, writes the page, and keeps a current ``style.css`` beside it.

Example
-------
>>> from pathlib import Path
>>> template = PageTemplate.load(Path("template/template.html"),
...                              Path("template/style.css"))  # doctest: +SKIP
>>> assembler = PageAssembler(template)  # doctest: +SKIP
>>> html = assembler.assemble("<p>Hi</p>", [], [], depth=1)  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import filecmp
import shutil
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader

from ssg_pages._constants import (
    BREADCRUMB_SLOT_ID,
    CONTENT_SLOT_ID,
    SIDEBAR_SLOT_ID,
    STYLESHEET_FILENAME,
    STYLESHEET_SLOT_ID,
)

from .errors import TemplateStructureError
from .paths import relative_reference

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4.element import Tag

    from .models import BreadcrumbEntry, Document, SidebarEntry

REQUIRED_SLOT_IDS = (
    CONTENT_SLOT_ID,
    SIDEBAR_SLOT_ID,
    BREADCRUMB_SLOT_ID,
    STYLESHEET_SLOT_ID,
)


@dc.dataclass(frozen=True, slots=True)
class TemplateSlots:
    """Injection points resolved inside one parsed copy of the template."""

    content: Tag
    sidebar: Tag
    breadcrumb: Tag
    stylesheet: Tag


class PageTemplate:
    """Validated page template markup plus the stylesheet it ships with."""

    def __init__(
        self, markup: str, stylesheet_source: Path, *, origin: str = "<string>"
    ) -> None:
        """Validate ``markup`` and remember the stylesheet source.

        Raises
        ------
        TemplateStructureError
            If any of the four required element ids is absent.
        """
        self.markup = markup
        self.stylesheet_source = stylesheet_source
        self.origin = origin
        self._resolve(BeautifulSoup(markup, "html.parser"))

    @classmethod
    def load(cls, template_path: Path, stylesheet_path: Path) -> PageTemplate:
        """Read the template file and validate its injection points."""
        markup = template_path.read_text(encoding="utf-8")
        return cls(markup, stylesheet_path, origin=str(template_path))

    def instantiate(self) -> tuple[BeautifulSoup, TemplateSlots]:
        """Return a fresh parse of the template and its resolved slots."""
        soup = BeautifulSoup(self.markup, "html.parser")
        return soup, self._resolve(soup)

    def _resolve(self, soup: BeautifulSoup) -> TemplateSlots:
        found: dict[str, Tag] = {}
        missing: list[str] = []
        for slot_id in REQUIRED_SLOT_IDS:
            element = soup.find(id=slot_id)
            if element is None:
                missing.append(slot_id)
            else:
                found[slot_id] = typ.cast("Tag", element)
        if missing:
            raise TemplateStructureError(self.origin, missing)
        return TemplateSlots(
            content=found[CONTENT_SLOT_ID],
            sidebar=found[SIDEBAR_SLOT_ID],
            breadcrumb=found[BREADCRUMB_SLOT_ID],
            stylesheet=found[STYLESHEET_SLOT_ID],
        )


class PageAssembler:
    """Fill a template copy for one document and write the finished page."""

    def __init__(
        self, template: PageTemplate, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the assembler and the Jinja environment for list items.

        Parameters
        ----------
        template : PageTemplate
            Validated page template shared by every document of the build.
        templates_dir : Path, optional
            Directory containing ``nav_items.jinja``; defaults to the package
            templates.
        """
        self.template = template
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.nav_items = self.env.get_template("nav_items.jinja")

    def assemble(
        self,
        content: str,
        sidebar: cabc.Sequence[SidebarEntry],
        breadcrumb: cabc.Sequence[BreadcrumbEntry],
        depth: int,
    ) -> str:
        """Return the full page HTML for one document.

        Parameters
        ----------
        content : str
            Sanitized, link-rewritten HTML for the document body. Replaces the
            content container's children.
        sidebar : Sequence[SidebarEntry]
            Entries appended, in order, to the sidebar list.
        breadcrumb : Sequence[BreadcrumbEntry]
            Entries appended, in order, to the breadcrumb list; link-less
            entries render as plain text.
        depth : int
            Folder depth of the document, used for the stylesheet reference.
        """
        soup, slots = self.template.instantiate()
        slots.content.clear()
        _append_markup(slots.content, content)
        _append_markup(slots.sidebar, self.nav_items.render(entries=sidebar))
        _append_markup(slots.breadcrumb, self.nav_items.render(entries=breadcrumb))
        slots.stylesheet["href"] = relative_reference(depth, STYLESHEET_FILENAME)
        return str(soup)

    def write(self, document: Document, html: str) -> Path:
        """Write ``html`` to the document's output path.

        Notes
        -----
        Creates the output directory when needed and reconciles the shared
        stylesheet there before writing the page. Filesystem errors propagate.
        """
        output_dir = document.output_path.parent
        output_dir.mkdir(parents=True, exist_ok=True)
        reconcile_stylesheet(self.template.stylesheet_source, output_dir)
        document.output_path.write_text(html, encoding="utf-8")
        return document.output_path


def reconcile_stylesheet(source: Path, directory: Path) -> bool:
    """Copy ``source`` into ``directory`` unless an identical copy is present.

    Returns
    -------
    bool
        ``True`` when the stylesheet was written (missing or stale copy).
    """
    destination = directory / STYLESHEET_FILENAME
    if destination.is_file() and filecmp.cmp(source, destination, shallow=False):
        return False
    shutil.copyfile(source, destination)
    return True


def _append_markup(parent: Tag, markup: str) -> None:
    """Parse ``markup`` and append its top-level nodes to ``parent``."""
    fragment = BeautifulSoup(markup, "html.parser")
    for node in list(fragment.contents):
        parent.append(node.extract())


__all__ = [
    "REQUIRED_SLOT_IDS",
    "PageAssembler",
    "PageTemplate",
    "TemplateSlots",
    "reconcile_stylesheet",
]
