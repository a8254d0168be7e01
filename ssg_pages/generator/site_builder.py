"""High-level orchestration for static site generation.

This module walks the configured input folder, renders every Markdown
document with ``HtmlContentRenderer``, sanitizes and link-rewrites the
result, builds sidebar and breadcrumb navigation from the folder layout, and
writes one themed HTML page per document into the mirrored output folder. It
exposes :class:`SiteBuilder`, which consumes a
:class:`~ssg_pages.config.SiteConfig`.

Example
-------
>>> from pathlib import Path
>>> from ssg_pages.config import read_config_mapping, validate_site_config
>>> from ssg_pages.generator import SiteBuilder
>>> raw = read_config_mapping(Path("ssg.yaml"))  # doctest: +SKIP
>>> config = validate_site_config(raw, base_dir=Path("."))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('/srv/site/index.html'), ...]
"""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePosixPath

from .link_rewriter import rewrite_document_links
from .models import Document
from .navigation import build_breadcrumb, build_sidebar
from .page_assembler import PageAssembler, PageTemplate
from .paths import document_depth
from .renderer import HtmlContentRenderer
from .sanitizer import HtmlSanitizer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ssg_pages.config import SiteConfig


def discover_documents(input_root: Path, source_suffix: str) -> list[PurePosixPath]:
    """Return every source document under ``input_root`` as a relative path.

    The walk is recursive and keeps regular files whose suffix equals
    ``source_suffix``. Results are sorted by their POSIX form so builds are
    reproducible regardless of filesystem enumeration order.
    """
    relative_paths = [
        PurePosixPath(path.relative_to(input_root).as_posix())
        for path in input_root.rglob(f"*{source_suffix}")
        if path.is_file() and path.suffix == source_suffix
    ]
    return sorted(relative_paths, key=lambda path: path.as_posix())


class SiteBuilder:
    """Render every source document into a linked page of the output site."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        renderer: HtmlContentRenderer | None = None,
        sanitizer: HtmlSanitizer | None = None,
    ) -> None:
        """Initialize the builder and load the page template.

        Parameters
        ----------
        config : SiteConfig
            Validated build configuration.
        renderer : HtmlContentRenderer, optional
            Markdown renderer; defaults to one using ``config.pygments_style``.
        sanitizer : HtmlSanitizer, optional
            HTML sanitizer; defaults to the site allowlist.

        Raises
        ------
        TemplateStructureError
            If the template lacks a required injection point. Raised here so
            the run aborts before any page is written.
        """
        self.config = config
        self.renderer = renderer or HtmlContentRenderer(config.pygments_style)
        self.sanitizer = sanitizer or HtmlSanitizer()
        self.template = PageTemplate.load(config.template_path, config.stylesheet_path)
        self.assembler = PageAssembler(self.template)

    def run(self) -> list[Path]:
        """Build the whole site and return the written page paths in order."""
        return list(self.iter_build())

    def iter_build(self) -> cabc.Iterator[Path]:
        """Build the site one document at a time, yielding each written page.

        Notes
        -----
        Documents are processed strictly in sequence. Any error propagates and
        stops the run; pages written before the failure stay on disk.
        """
        for relative_path in discover_documents(
            self.config.input_folder, self.config.source_suffix
        ):
            document = Document.load(
                relative_path,
                input_root=self.config.input_folder,
                output_root=self.config.output_folder,
                output_suffix=self.config.output_suffix,
            )
            yield self.build_document(document)

    def build_document(self, document: Document) -> Path:
        """Render, link, assemble, and write the page for ``document``."""
        content = self.render_content(document.content)
        sidebar = build_sidebar(
            document.source_path.parent,
            source_suffix=self.config.source_suffix,
            output_suffix=self.config.output_suffix,
        )
        breadcrumb = build_breadcrumb(
            document.relative_path, self.config.default_document_filename
        )
        html = self.assembler.assemble(
            content, sidebar, breadcrumb, document_depth(document.relative_path)
        )
        return self.assembler.write(document, html)

    def render_content(self, text: str) -> str:
        """Return sanitized page HTML with local document links retargeted."""
        rendered = self.renderer.render(text)
        sanitized = self.sanitizer.sanitize(rendered)
        return rewrite_document_links(
            sanitized,
            source_suffix=self.config.source_suffix,
            output_suffix=self.config.output_suffix,
        )


__all__ = ["SiteBuilder", "discover_documents"]
