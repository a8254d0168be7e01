"""Load site configuration YAML and validate it into a typed result."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ssg_pages._constants import STYLESHEET_FILENAME, TEMPLATE_FILENAME

from .helpers import _optional_str, _resolve_path
from .models import ConfigIssue, ConfigIssueKind, SiteConfig, SiteConfigError

REQUIRED_FOLDER_KEYS = ("input_folder", "output_folder")
DEFAULT_TEMPLATE_DIR = "template"
DEFAULT_DOCUMENT_NAME = "index"
DEFAULT_PYGMENTS_STYLE = "monokai"


def read_config_mapping(path: Path) -> dict[str, typ.Any]:
    """Read the YAML configuration file into a plain mapping.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``ssg.yaml``).

    Returns
    -------
    dict[str, Any]
        Raw key/value pairs; an empty file yields an empty mapping.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded)


def validate_site_config(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> SiteConfig | ConfigIssue:
    """Validate raw settings and build a :class:`SiteConfig`.

    Expected misconfiguration is reported as a :class:`ConfigIssue` value
    rather than raised, so the entry point can inspect it and stop before any
    document is processed.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Merged settings from the YAML file and command-line overrides.
    base_dir : Path
        Directory against which relative paths are resolved.

    Returns
    -------
    SiteConfig | ConfigIssue
        The resolved configuration, or the first problem found.

    Examples
    --------
    >>> from pathlib import Path
    >>> result = validate_site_config({}, base_dir=Path("."))
    >>> result.kind.value, result.key
    ('missing-key', 'input_folder')
    """
    folders: dict[str, Path] = {}
    for key in REQUIRED_FOLDER_KEYS:
        value = raw.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            return ConfigIssue(ConfigIssueKind.MISSING_KEY, key)
        if not isinstance(value, str | Path):
            return ConfigIssue(ConfigIssueKind.MALFORMED, key, str(value))
        resolved = _resolve_path(value, base_dir)
        issue = _check_directory(key, resolved)
        if issue is not None:
            return issue
        folders[key] = resolved

    template_value = raw.get("template_dir") or DEFAULT_TEMPLATE_DIR
    if not isinstance(template_value, str | Path):
        return ConfigIssue(ConfigIssueKind.MALFORMED, "template_dir", str(template_value))
    template_dir = _resolve_path(template_value, base_dir)
    issue = _check_directory("template_dir", template_dir) or _check_template_assets(
        template_dir
    )
    if issue is not None:
        return issue

    document_name = _optional_str(raw.get("default_document_name")) or DEFAULT_DOCUMENT_NAME
    if "/" in document_name or "\\" in document_name or Path(document_name).suffix:
        return ConfigIssue(
            ConfigIssueKind.MALFORMED,
            "default_document_name",
            document_name,
            "Use a bare file name without folders or extension, e.g. 'index'.",
        )

    pygments_style = _optional_str(raw.get("pygments_style")) or DEFAULT_PYGMENTS_STYLE

    return SiteConfig(
        input_folder=folders["input_folder"],
        output_folder=folders["output_folder"],
        template_dir=template_dir,
        default_document_name=document_name,
        pygments_style=pygments_style,
    )


def _check_directory(key: str, path: Path) -> ConfigIssue | None:
    """Return an issue when ``path`` is missing or is not a directory."""
    if not path.exists():
        detail = ""
        if path.suffix:
            detail = (
                f"It looks like a file; point '{key}' at its parent directory "
                "or another appropriate folder."
            )
        return ConfigIssue(ConfigIssueKind.NOT_FOUND, key, str(path), detail)
    if not path.is_dir():
        return ConfigIssue(ConfigIssueKind.NOT_A_DIRECTORY, key, str(path))
    return None


def _check_template_assets(template_dir: Path) -> ConfigIssue | None:
    """Return an issue when the template directory lacks its HTML or CSS file."""
    for asset in (template_dir / TEMPLATE_FILENAME, template_dir / STYLESHEET_FILENAME):
        if not asset.is_file():
            return ConfigIssue(
                ConfigIssueKind.NOT_FOUND,
                "template_dir",
                str(asset),
                "Run 'ssg init' to create a starter template.",
            )
    return None


__all__ = [
    "DEFAULT_DOCUMENT_NAME",
    "DEFAULT_PYGMENTS_STYLE",
    "DEFAULT_TEMPLATE_DIR",
    "read_config_mapping",
    "validate_site_config",
]
