"""Cyclopts CLI entrypoint for building static sites from Markdown folders.

The ``ssg`` console script defined here can build a cross-linked HTML site
from a folder of Markdown documents and scaffold the page template such a
build needs. Typical usage involves running ``ssg init`` once to create a
``template/`` folder, then ``ssg build`` locally or in CI whenever the sources
change.

Examples
--------
Build using a configuration file:

>>> from ssg_pages.cli import app
>>> app(["build", "--config", "ssg.yaml"])  # doctest: +SKIP

Build with folders supplied directly:

>>> app(
...     ["build", "--input-folder", "docs", "--output-folder", "site"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import (
    ConfigIssue,
    ConfigIssueKind,
    SiteConfig,
    SiteConfigError,
    read_config_mapping,
    validate_site_config,
)
from .config.helpers import _merge_overrides
from .generator import SiteBuilder, SiteBuildError
from .scaffold import TemplateScaffold

CONFIG_ERROR_EXIT_CODE = 2
BUILD_ERROR_EXIT_CODE = 1

app = App(name="ssg", config=cyclopts.config.Env("SSG_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _fail(message: str, code: int) -> typ.NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""
    print(message, file=sys.stderr)
    raise SystemExit(code)


def _load_raw_settings(config: Path | None) -> dict[str, typ.Any] | ConfigIssue:
    """Read the YAML file when one is given, reporting problems as an issue."""
    if config is None:
        return {}
    try:
        return read_config_mapping(config)
    except FileNotFoundError:
        return ConfigIssue(ConfigIssueKind.NOT_FOUND, "config", str(config))
    except (SiteConfigError, YAMLError) as exc:
        return ConfigIssue(ConfigIssueKind.MALFORMED, "config", str(config), str(exc))


def resolve_build_config(
    config: Path | None, overrides: dict[str, typ.Any]
) -> SiteConfig | ConfigIssue:
    """Merge file settings with CLI overrides and validate the result.

    Parameters
    ----------
    config : Path or None
        Optional YAML configuration file. Relative paths inside it resolve
        against the file's directory.
    overrides : dict[str, Any]
        Values supplied on the command line or via ``SSG_*`` variables;
        ``None`` entries are ignored. Path overrides resolve against the
        current directory.

    Returns
    -------
    SiteConfig | ConfigIssue
        The validated configuration or the first problem found.
    """
    raw = _load_raw_settings(config)
    if isinstance(raw, ConfigIssue):
        return raw
    absolute_overrides = {
        key: Path(value).resolve() if isinstance(value, Path) else value
        for key, value in overrides.items()
    }
    merged = _merge_overrides(raw, absolute_overrides)
    base_dir = config.resolve().parent if config is not None else Path.cwd()
    return validate_site_config(merged, base_dir=base_dir)


@app.command(help="Build the static HTML site from Markdown sources.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="SSG_CONFIG")
    ] = None,
    input_folder: typ.Annotated[
        Path | None,
        Parameter(help="Folder holding the Markdown sources", env_var="SSG_INPUT_FOLDER"),
    ] = None,
    output_folder: typ.Annotated[
        Path | None,
        Parameter(help="Folder receiving the HTML site", env_var="SSG_OUTPUT_FOLDER"),
    ] = None,
    default_document_name: typ.Annotated[
        str | None,
        Parameter(
            help="Extension-less name of each folder's landing page",
            env_var="SSG_DEFAULT_DOCUMENT_NAME",
        ),
    ] = None,
    template_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Folder holding template.html and style.css",
            env_var="SSG_TEMPLATE_DIR",
        ),
    ] = None,
    pygments_style: typ.Annotated[
        str | None,
        Parameter(help="Pygments style for code blocks", env_var="SSG_PYGMENTS_STYLE"),
    ] = None,
) -> None:
    """Build every Markdown document into a page of the output site.

    Parameters
    ----------
    config : Path or None, optional
        YAML file supplying any of the settings below.
    input_folder : Path or None, optional
        Existing folder containing ``.md`` sources.
    output_folder : Path or None, optional
        Existing folder that receives the generated site.
    default_document_name : str or None, optional
        Landing page name linked from breadcrumbs; defaults to ``index``.
    template_dir : Path or None, optional
        Folder with ``template.html`` and ``style.css``; defaults to
        ``template``.
    pygments_style : str or None, optional
        Highlighting style; defaults to ``monokai``.

    Returns
    -------
    None
        Writes the site and prints each generated path.

    Raises
    ------
    SystemExit
        With status 2 when the configuration is invalid (nothing is built), or
        status 1 when the build aborts, e.g. on a malformed template.
    """
    result = resolve_build_config(
        config,
        {
            "input_folder": input_folder,
            "output_folder": output_folder,
            "default_document_name": default_document_name,
            "template_dir": template_dir,
            "pygments_style": pygments_style,
        },
    )
    if isinstance(result, ConfigIssue):
        _fail(result.message, CONFIG_ERROR_EXIT_CODE)

    try:
        builder = SiteBuilder(result)
        for path in builder.iter_build():
            print(f"wrote {_format_path(path)}")
    except SiteBuildError as exc:
        _fail(str(exc), BUILD_ERROR_EXIT_CODE)


@app.command(help="Write a starter page template and stylesheet.")
def init(
    *,
    template_dir: typ.Annotated[
        Path, Parameter(help="Folder to create the template in")
    ] = Path("template"),
    site_name: typ.Annotated[
        str, Parameter(help="Name shown in the page header")
    ] = "Documentation",
    pygments_style: typ.Annotated[
        str, Parameter(help="Pygments style embedded in style.css")
    ] = "monokai",
    force: typ.Annotated[
        bool, Parameter(help="Overwrite existing template files")
    ] = False,
) -> None:
    """Scaffold ``template.html`` and ``style.css`` for a new site."""
    scaffold = TemplateScaffold(
        template_dir, site_name=site_name, pygments_style=pygments_style
    )
    try:
        written = scaffold.run(force=force)
    except SiteBuildError as exc:
        _fail(str(exc), BUILD_ERROR_EXIT_CODE)
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `ssg` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
