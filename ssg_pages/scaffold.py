"""Starter template scaffolding for new sites.

This module writes the ``template.html`` and ``style.css`` pair a build needs
into a template directory. The HTML carries the four element ids the page
assembler injects into; the stylesheet bundles layout rules plus the Pygments
highlighting rules for the configured style. The main entry point is
``TemplateScaffold``.

Typical usage mirrors ``ssg init``:

>>> from pathlib import Path
>>> scaffold = TemplateScaffold(Path("template"))  # doctest: +SKIP
>>> scaffold.run()  # doctest: +SKIP
[PosixPath('template/template.html'), PosixPath('template/style.css')]
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import STYLESHEET_FILENAME, TEMPLATE_FILENAME
from .generator.errors import ScaffoldExistsError
from .generator.renderer import HtmlContentRenderer

SCAFFOLD_TEMPLATES = {
    TEMPLATE_FILENAME: "scaffold/template.html.jinja",
    STYLESHEET_FILENAME: "scaffold/style.css.jinja",
}


class TemplateScaffold:
    """Render the starter page template and stylesheet into a directory."""

    def __init__(
        self,
        target_dir: Path,
        *,
        site_name: str = "Documentation",
        pygments_style: str = "monokai",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the scaffold and Jinja environment.

        Parameters
        ----------
        target_dir : Path
            Directory receiving ``template.html`` and ``style.css``.
        site_name : str, optional
            Name shown in the page title and header.
        pygments_style : str, optional
            Pygments style whose rules are appended to the stylesheet.
        templates_dir : Path, optional
            Directory containing the scaffold Jinja templates. Defaults to
            ``ssg_pages/templates``.
        """
        self.target_dir = target_dir
        self.site_name = site_name
        self.renderer = HtmlContentRenderer(pygments_style)
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html.jinja"]),
            keep_trailing_newline=True,
        )

    def run(self, *, force: bool = False) -> list[Path]:
        """Write the starter files, returning their paths.

        Raises
        ------
        ScaffoldExistsError
            If a target file already exists and ``force`` is false.
        """
        targets = [self.target_dir / name for name in SCAFFOLD_TEMPLATES]
        existing = [path for path in targets if path.exists()]
        if existing and not force:
            names = ", ".join(str(path) for path in existing)
            msg = f"Refusing to overwrite existing template files: {names}. Use --force."
            raise ScaffoldExistsError(msg)

        self.target_dir.mkdir(parents=True, exist_ok=True)
        context = {
            "site_name": self.site_name,
            "pygments_style": self.renderer.pygments_style,
            "pygments_css": self.renderer.stylesheet,
        }
        written: list[Path] = []
        for path, template_name in zip(targets, SCAFFOLD_TEMPLATES.values(), strict=True):
            text = self.env.get_template(template_name).render(**context)
            path.write_text(text, encoding="utf-8")
            written.append(path)
        return written


__all__ = ["TemplateScaffold"]
