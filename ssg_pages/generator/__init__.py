"""Utilities for rendering, linking, and assembling static site pages."""

from .errors import ScaffoldExistsError, SiteBuildError, TemplateStructureError
from .link_rewriter import rewrite_document_links
from .models import BreadcrumbEntry, Document, SidebarEntry
from .navigation import build_breadcrumb, build_sidebar
from .page_assembler import PageAssembler, PageTemplate
from .renderer import HtmlContentRenderer
from .sanitizer import HtmlSanitizer
from .site_builder import SiteBuilder, discover_documents

__all__ = [
    "BreadcrumbEntry",
    "Document",
    "HtmlContentRenderer",
    "HtmlSanitizer",
    "PageAssembler",
    "PageTemplate",
    "ScaffoldExistsError",
    "SidebarEntry",
    "SiteBuildError",
    "SiteBuilder",
    "TemplateStructureError",
    "build_breadcrumb",
    "build_sidebar",
    "discover_documents",
    "rewrite_document_links",
]
