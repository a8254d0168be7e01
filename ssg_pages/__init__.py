"""Utilities for turning a folder of Markdown documents into a static site.

This package exposes the CLI entry points used by the ``ssg`` console script
to build a cross-linked HTML site and to scaffold a starter page template.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from ssg_pages import main
>>> main()  # doctest: +SKIP
>>> from ssg_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
